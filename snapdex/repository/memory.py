from collections.abc import Sequence

from snapdex.models.card import Card
from snapdex.repository.base import CardRepository


class InMemoryCardRepository(CardRepository):
    """
    Card repository kept in memory.

    Used as a fake in tests. Set fail_writes to make save_cards report a
    failed write without changing the stored cards.
    """

    def __init__(self, cards: Sequence[Card] = (), next_id: int = 0):
        self.cards: list[Card] = list(cards)
        self.counter = next_id
        self.fail_writes = False
        self.save_count = 0

    def load_cards(self) -> list[Card]:
        return list(self.cards)

    def save_cards(self, cards: Sequence[Card]) -> bool:
        self.save_count += 1
        if self.fail_writes:
            return False
        self.cards = list(cards)
        return True

    def get_next_card_id(self) -> int:
        self.counter += 1
        return self.counter
