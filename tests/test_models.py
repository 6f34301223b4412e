from dataclasses import FrozenInstanceError
from datetime import UTC, datetime
from uuid import UUID

import pytest

from snapdex.models.card import Card, CardType, IntValue, Stat, TextValue, stat_display_string
from snapdex.models.failure import AIServiceError, FailureKind, KnownError, PersistenceError


class TestCardType:
    def test_has_eighteen_types(self) -> None:
        assert len(CardType) == 18

    def test_value_is_lowercase_name(self) -> None:
        assert CardType.FIRE.value == "fire"
        assert CardType("psychic") is CardType.PSYCHIC

    def test_display_name(self) -> None:
        assert CardType.ELECTRIC.display_name == "Electric"


class TestStatValue:
    def test_integer_display(self) -> None:
        assert stat_display_string(IntValue(250)) == "250"
        assert IntValue(-3).display_string == "-3"

    def test_text_display_is_verbatim(self) -> None:
        assert stat_display_string(TextValue("18m")) == "18m"
        assert TextValue("  Very Rare ").display_string == "  Very Rare "

    def test_variants_are_distinct(self) -> None:
        """Integer 5 and text "5" are different values."""
        assert IntValue(5) != TextValue("5")


class TestStat:
    def test_generates_id(self) -> None:
        stat = Stat(category="Power", value=IntValue(65))
        assert isinstance(stat.id, UUID)

    def test_same_content_different_identity(self) -> None:
        first = Stat(category="Power", value=IntValue(65))
        second = Stat(category="Power", value=IntValue(65))
        assert first.id != second.id
        assert first != second

    def test_empty_category_rejected(self) -> None:
        with pytest.raises(ValueError):
            Stat(category="   ", value=IntValue(1))

    def test_stat_immutable(self) -> None:
        stat = Stat(category="Power", value=IntValue(65))
        with pytest.raises(FrozenInstanceError):
            stat.category = "Defense"  # type: ignore[misc]


class TestCard:
    def test_card_defaults(self) -> None:
        card = Card(display_id=1, title="Oak", description="A tree", image_url=None)
        assert card.type is CardType.NORMAL
        assert card.stats == ()
        assert UUID(card.id)
        assert card.created_at.tzinfo is not None

    def test_ids_are_unique(self) -> None:
        first = Card(display_id=1, title="Oak", description="", image_url=None)
        second = Card(display_id=1, title="Oak", description="", image_url=None)
        assert first.id != second.id

    def test_card_immutable(self) -> None:
        card = Card(display_id=1, title="Oak", description="", image_url=None)
        with pytest.raises(FrozenInstanceError):
            card.title = "Pine"  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        created = datetime(2024, 5, 1, tzinfo=UTC)
        stat = Stat(category="Age", value=IntValue(250))
        first = Card(
            id="card-1",
            display_id=3,
            title="Oak",
            description="",
            image_url=None,
            stats=(stat,),
            created_at=created,
        )
        second = Card(
            id="card-1",
            display_id=3,
            title="Oak",
            description="",
            image_url=None,
            stats=(stat,),
            created_at=created,
        )
        assert first == second

    @pytest.mark.parametrize(
        ("display_id", "expected"),
        [(7, "#007"), (42, "#042"), (100, "#100"), (1042, "#1042")],
    )
    def test_formatted_id(self, display_id: int, expected: str) -> None:
        card = Card(display_id=display_id, title="Oak", description="", image_url=None)
        assert card.formatted_id == expected


class TestFailures:
    def test_ai_service_error(self) -> None:
        error = AIServiceError(stage="analyze_image", detail="timeout")

        assert error.kind is FailureKind.GENERATION_FAILED
        assert "analyze_image" in error.message
        assert error.to_dict()["detail"] == "timeout"

    def test_persistence_error(self) -> None:
        error = PersistenceError(operation="save_cards")

        assert isinstance(error, KnownError)
        assert error.to_dict() == {
            "kind": "persistence_failed",
            "message": "Your collection could not be saved",
            "detail": "save_cards",
            "suggestion": "Your changes are kept for this session. Try again later.",
        }
