from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import assert_never
from uuid import UUID, uuid4


class CardType(str, Enum):
    """Theme category of a card. Persisted by value."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class IntValue:
    """Integer variant of a stat value."""

    value: int

    @property
    def display_string(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class TextValue:
    """Text variant of a stat value."""

    value: str

    @property
    def display_string(self) -> str:
        return self.value


StatValue = IntValue | TextValue


def stat_display_string(value: StatValue) -> str:
    """Render a stat value for display: digits for integers, text verbatim."""
    match value:
        case IntValue(value=number):
            return str(number)
        case TextValue(value=text):
            return text
        case _:
            assert_never(value)


@dataclass(frozen=True, slots=True)
class Stat:
    """
    A single labeled value on a card.

    Attributes:
        category: Label shown next to the value (e.g., "Power", "Habitat")
        value: Integer or text value
        id: Identity of this stat; two stats with the same category and
            value are still distinct entries
    """

    category: str
    value: StatValue
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not self.category.strip():
            raise ValueError("Stat category must not be empty")


def _new_card_id() -> str:
    return str(uuid4())


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Card:
    """
    A collectible card.

    Attributes:
        display_id: Sequential number shown to the user, issued by the repository
        title: Card title
        description: Flavor text
        image_url: Artwork reference, None when the card has no artwork
        stats: Stats in display order
        type: Theme category
        id: Unique identifier; the equality and persistence key
        created_at: When the card was constructed (UTC)
    """

    display_id: int
    title: str
    description: str
    image_url: str | None
    stats: tuple[Stat, ...] = ()
    type: CardType = CardType.NORMAL
    id: str = field(default_factory=_new_card_id)
    created_at: datetime = field(default_factory=_now)

    @property
    def formatted_id(self) -> str:
        """Display id as "#007"; wider numbers are not truncated."""
        return f"#{self.display_id:03d}"
