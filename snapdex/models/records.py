"""
Persisted record shapes for cards.

Cards are stored as a JSON array of CardRecord objects. Field names use the
camelCase keys of the stored payload; stat values keep their integer/string
tag so they decode back to the same variant.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Annotated, Literal, assert_never
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from snapdex.models.card import Card, CardType, IntValue, Stat, StatValue, TextValue


class IntValueRecord(BaseModel):
    kind: Literal["integer"] = "integer"
    value: int


class TextValueRecord(BaseModel):
    kind: Literal["string"] = "string"
    value: str


StatValueRecord = Annotated[IntValueRecord | TextValueRecord, Field(discriminator="kind")]


class StatRecord(BaseModel):
    """Stored form of a Stat."""

    id: UUID
    category: str = Field(..., min_length=1)
    value: StatValueRecord

    @field_validator("category")
    @classmethod
    def category_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("category must not be blank")
        return v


class CardRecord(BaseModel):
    """Stored form of a Card."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    display_id: int = Field(..., alias="displayId")
    title: str
    description: str
    image_url: str | None = Field(default=None, alias="imageUrl")
    stats: list[StatRecord] = Field(default_factory=list)
    type: CardType = CardType.NORMAL
    created_at: datetime = Field(..., alias="createdAt")


_card_list_adapter = TypeAdapter(list[CardRecord])


def stat_value_to_record(value: StatValue) -> IntValueRecord | TextValueRecord:
    match value:
        case IntValue(value=number):
            return IntValueRecord(value=number)
        case TextValue(value=text):
            return TextValueRecord(value=text)
        case _:
            assert_never(value)


def record_to_stat_value(record: IntValueRecord | TextValueRecord) -> StatValue:
    match record:
        case IntValueRecord(value=number):
            return IntValue(number)
        case TextValueRecord(value=text):
            return TextValue(text)
        case _:
            assert_never(record)


def card_to_record(card: Card) -> CardRecord:
    """Convert a domain card to its stored form."""
    return CardRecord(
        id=card.id,
        display_id=card.display_id,
        title=card.title,
        description=card.description,
        image_url=card.image_url,
        stats=[
            StatRecord(id=stat.id, category=stat.category, value=stat_value_to_record(stat.value))
            for stat in card.stats
        ],
        type=card.type,
        created_at=card.created_at,
    )


def record_to_card(record: CardRecord) -> Card:
    """Convert a stored record back to a domain card."""
    return Card(
        id=record.id,
        display_id=record.display_id,
        title=record.title,
        description=record.description,
        image_url=record.image_url,
        stats=tuple(
            Stat(id=stat.id, category=stat.category, value=record_to_stat_value(stat.value))
            for stat in record.stats
        ),
        type=record.type,
        created_at=record.created_at,
    )


def encode_cards(cards: Sequence[Card]) -> str:
    """Encode cards as the JSON array stored in the collection slot."""
    records = [card_to_record(card) for card in cards]
    return _card_list_adapter.dump_json(records, by_alias=True).decode("utf-8")


def decode_cards(payload: str | bytes) -> list[Card]:
    """
    Decode the JSON array stored in the collection slot.

    Raises:
        pydantic.ValidationError: If the payload is not a valid card array
    """
    records = _card_list_adapter.validate_json(payload)
    return [record_to_card(record) for record in records]
