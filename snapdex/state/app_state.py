"""
Application state: the single source of truth for the card collection.

AppState is mutated only through dispatch(action). After every dispatched
action, subscribers receive the action and an immutable snapshot of the
resulting state.

INVARIANTS:
- cards never holds two cards with the same id
- after each successful write, cards mirrors the repository contents
- is_generating_card is cleared on both the success and failure paths

CONCURRENCY:
AppState belongs to one asyncio event loop. dispatch never awaits, so
actions are applied one at a time. GenerateCard is the only action that
suspends: it starts a task and returns immediately; the task applies its
result later on the same loop.

A GenerateCard dispatched while a generation is still running is rejected:
state is unchanged and the running task is returned.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, assert_never

from snapdex.models.card import Card
from snapdex.models.failure import AIServiceError, KnownError, PersistenceError
from snapdex.models.records import card_to_record
from snapdex.repository.base import CardRepository
from snapdex.services.ai_service import AIService, MockAIService
from snapdex.services.card_generator import CardGenerator
from snapdex.services.sample_cards import get_sample_cards
from snapdex.state.actions import (
    Action,
    AddCard,
    DeselectCard,
    DismissCameraView,
    DismissError,
    GenerateCard,
    RemoveCard,
    SelectCard,
    ShowCameraView,
    ShowNewCard,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of AppState after an action."""

    cards: tuple[Card, ...]
    selected_card: Card | None
    is_camera_presented: bool
    is_generating_card: bool
    is_showing_new_card: bool
    error: KnownError | None

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form, cards in their persisted record shape."""
        return {
            "cards": [_card_to_dict(card) for card in self.cards],
            "selectedCard": _card_to_dict(self.selected_card) if self.selected_card else None,
            "isCameraPresented": self.is_camera_presented,
            "isGeneratingCard": self.is_generating_card,
            "isShowingNewCard": self.is_showing_new_card,
            "error": self.error.to_dict() if self.error else None,
        }


def _card_to_dict(card: Card) -> dict[str, Any]:
    return card_to_record(card).model_dump(mode="json", by_alias=True)


Listener = Callable[[Action, StateSnapshot], None]


class AppState:
    """Card collection, selection and UI flags, mutated only by dispatch."""

    def __init__(
        self,
        repository: CardRepository,
        ai_service: AIService | None = None,
        seed_sample_cards: bool = False,
    ):
        self._repository = repository
        self._generator = CardGenerator(repository, ai_service or MockAIService())
        self._seed_sample_cards = seed_sample_cards
        self._listeners: list[Listener] = []
        self._generation_task: asyncio.Task[None] | None = None

        self._cards: list[Card] = []
        self._selected_card: Card | None = None
        self._is_camera_presented = False
        self._is_generating_card = False
        self._is_showing_new_card = False
        self._error: KnownError | None = None

        self.load()

    # --- Observable fields ---

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def selected_card(self) -> Card | None:
        return self._selected_card

    @property
    def is_camera_presented(self) -> bool:
        return self._is_camera_presented

    @property
    def is_generating_card(self) -> bool:
        return self._is_generating_card

    @property
    def is_showing_new_card(self) -> bool:
        return self._is_showing_new_card

    @property
    def error(self) -> KnownError | None:
        return self._error

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            cards=self.cards,
            selected_card=self._selected_card,
            is_camera_presented=self._is_camera_presented,
            is_generating_card=self._is_generating_card,
            is_showing_new_card=self._is_showing_new_card,
            error=self._error,
        )

    # --- Subscription ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after every dispatched action.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, action: Action) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(action, snapshot)

    # --- Dispatch ---

    def dispatch(self, action: Action) -> asyncio.Task[None] | None:
        """
        Apply an action and notify subscribers.

        Returns the generation task for GenerateCard, None otherwise.

        Raises:
            RuntimeError: If GenerateCard is dispatched without a running event loop
        """
        task: asyncio.Task[None] | None = None

        match action:
            case SelectCard(card=card):
                self._selected_card = card
            case DeselectCard():
                self._selected_card = None
            case ShowCameraView():
                self._is_camera_presented = True
            case DismissCameraView():
                self._is_camera_presented = False
            case GenerateCard(image=image):
                task = self._start_generation(action, image)
            case ShowNewCard(card=card):
                self._selected_card = card
                self._is_showing_new_card = True
            case AddCard(card=card):
                self._add_card(card)
            case RemoveCard(card=card):
                self._remove_card(card)
            case DismissError():
                self._error = None
            case _:
                assert_never(action)

        self._notify(action)
        return task

    def load(self) -> None:
        """
        Reload cards from the repository.

        Cards sharing an id with an earlier card are dropped, keeping the
        first occurrence.
        """
        self._cards = []
        seen: set[str] = set()
        for card in self._repository.load_cards():
            if card.id in seen:
                logger.warning("Dropping duplicate card %s from loaded collection", card.id)
                continue
            seen.add(card.id)
            self._cards.append(card)

        if not self._cards and self._seed_sample_cards:
            logger.info("Collection is empty, showing sample cards")
            self._cards = get_sample_cards()

    # --- Transitions ---

    def _add_card(self, card: Card) -> None:
        if any(existing.id == card.id for existing in self._cards):
            logger.debug("Card %s already in collection, ignoring add", card.id)
            return

        self._cards.append(card)
        self._persist()

    def _remove_card(self, card: Card) -> None:
        # Written even when nothing matched
        self._cards = [existing for existing in self._cards if existing.id != card.id]
        self._persist()

    def _persist(self) -> None:
        if not self._repository.save_cards(self._cards):
            self._error = PersistenceError(
                operation="save_cards",
                detail=f"Failed to save {len(self._cards)} cards",
            )

    def _start_generation(self, action: GenerateCard, image: bytes) -> asyncio.Task[None]:
        if self._generation_task is not None and not self._generation_task.done():
            logger.warning("Card generation already in progress, rejecting request")
            return self._generation_task

        loop = asyncio.get_running_loop()
        self._is_generating_card = True
        self._generation_task = loop.create_task(self._generate(action, image))
        return self._generation_task

    async def _generate(self, action: GenerateCard, image: bytes) -> None:
        card: Card | None = None
        try:
            card = await self._generator.generate(image)
        except KnownError as e:
            self._error = e
        except Exception as e:
            logger.exception("Unexpected error during card generation")
            self._error = AIServiceError(stage="generate", detail=str(e) or type(e).__name__)
        finally:
            # Also runs on cancellation
            self._finish_generation()

        if card is None:
            self._notify(action)
        else:
            self.dispatch(ShowNewCard(card=card))

    def _finish_generation(self) -> None:
        self._is_generating_card = False
        self._generation_task = None
