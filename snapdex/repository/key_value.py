"""
Card repository backed by a key-value store.

The collection is one JSON array in a single slot; the display id counter is
an integer in a second slot.

Failure policy:
- A payload that fails to decode loads as an empty collection. The raw
  payload is first copied to "<cards_key>.corrupt" (once) so the next save
  cannot destroy the only copy.
- Encode or write failures are logged and reported through the return value
  of save_cards. They are never raised.
"""

import logging
from collections.abc import Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from snapdex.db.key_value import KeyValueStore
from snapdex.models.card import Card
from snapdex.models.records import decode_cards, encode_cards
from snapdex.repository.base import CardRepository

logger = logging.getLogger(__name__)

DEFAULT_CARDS_KEY = "snapDexCards"
DEFAULT_COUNTER_KEY = "totalSnapDexCardsMade"


class KeyValueCardRepository(CardRepository):
    """Durable card repository using two named slots of a KeyValueStore."""

    def __init__(
        self,
        store: KeyValueStore,
        cards_key: str = DEFAULT_CARDS_KEY,
        counter_key: str = DEFAULT_COUNTER_KEY,
    ):
        self.store = store
        self.cards_key = cards_key
        self.counter_key = counter_key

    @property
    def corrupt_key(self) -> str:
        return f"{self.cards_key}.corrupt"

    def load_cards(self) -> list[Card]:
        payload = self.store.get(self.cards_key)
        if payload is None:
            return []

        try:
            return decode_cards(payload)
        except ValidationError as e:
            logger.warning(
                "Stored collection in %s failed to decode (%d errors); loading empty",
                self.cards_key,
                e.error_count(),
            )
            self._preserve_corrupt_payload(payload)
            return []

    def save_cards(self, cards: Sequence[Card]) -> bool:
        try:
            payload = encode_cards(cards)
            self.store.set(self.cards_key, payload)
        except (ValueError, SQLAlchemyError) as e:
            logger.error("Failed to save %d cards to %s: %s", len(cards), self.cards_key, e)
            return False

        logger.debug("Saved %d cards to %s", len(cards), self.cards_key)
        return True

    def get_next_card_id(self) -> int:
        return self.store.increment(self.counter_key)

    def _preserve_corrupt_payload(self, payload: str) -> None:
        try:
            if self.store.get(self.corrupt_key) is None:
                self.store.set(self.corrupt_key, payload)
                logger.warning("Copied undecodable collection to %s", self.corrupt_key)
        except SQLAlchemyError as e:
            logger.error("Failed to preserve undecodable collection: %s", e)
