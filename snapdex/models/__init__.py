from snapdex.models.card import (
    Card,
    CardType,
    IntValue,
    Stat,
    StatValue,
    TextValue,
    stat_display_string,
)
from snapdex.models.failure import (
    AIServiceError,
    FailureKind,
    KnownError,
    PersistenceError,
)
from snapdex.models.records import (
    CardRecord,
    StatRecord,
    card_to_record,
    decode_cards,
    encode_cards,
    record_to_card,
)

__all__ = [
    "AIServiceError",
    "Card",
    "CardRecord",
    "CardType",
    "FailureKind",
    "IntValue",
    "KnownError",
    "PersistenceError",
    "Stat",
    "StatRecord",
    "StatValue",
    "TextValue",
    "card_to_record",
    "decode_cards",
    "encode_cards",
    "record_to_card",
    "stat_display_string",
]
