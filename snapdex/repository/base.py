from abc import ABC, abstractmethod
from collections.abc import Sequence

from snapdex.models.card import Card


class CardRepository(ABC):
    """
    Persistence for the card collection and the display id counter.

    All operations are synchronous. Reads and writes go through the whole
    collection; a personal collection is small and has exactly one writer.
    """

    @abstractmethod
    def load_cards(self) -> list[Card]:
        """Load all cards. Returns an empty list if nothing usable is stored."""

    @abstractmethod
    def save_cards(self, cards: Sequence[Card]) -> bool:
        """
        Replace the stored collection.

        Failures are logged, never raised. Returns False if the write failed.
        """

    @abstractmethod
    def get_next_card_id(self) -> int:
        """Increment the persisted counter and return the new display id."""

    def get_card(self, card_id: str) -> Card | None:
        """Look up a card by id in the freshly loaded collection."""
        return next((card for card in self.load_cards() if card.id == card_id), None)

    def save_card(self, card: Card) -> bool:
        """Replace the card with the same id, or append it if absent."""
        cards = self.load_cards()
        for index, existing in enumerate(cards):
            if existing.id == card.id:
                cards[index] = card
                break
        else:
            cards.append(card)
        return self.save_cards(cards)

    def delete_card(self, card_id: str) -> bool:
        """Remove every card with the given id."""
        cards = [card for card in self.load_cards() if card.id != card_id]
        return self.save_cards(cards)
