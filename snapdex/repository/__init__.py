from snapdex.repository.base import CardRepository
from snapdex.repository.key_value import (
    DEFAULT_CARDS_KEY,
    DEFAULT_COUNTER_KEY,
    KeyValueCardRepository,
)
from snapdex.repository.memory import InMemoryCardRepository

__all__ = [
    "CardRepository",
    "DEFAULT_CARDS_KEY",
    "DEFAULT_COUNTER_KEY",
    "InMemoryCardRepository",
    "KeyValueCardRepository",
]
