"""
Actions accepted by AppState.dispatch.

This is the closed set of state mutations; there is no other way to change
an AppState from outside.
"""

from dataclasses import dataclass

from snapdex.models.card import Card


@dataclass(frozen=True, slots=True)
class SelectCard:
    card: Card


@dataclass(frozen=True, slots=True)
class DeselectCard:
    pass


@dataclass(frozen=True, slots=True)
class ShowCameraView:
    pass


@dataclass(frozen=True, slots=True)
class DismissCameraView:
    pass


@dataclass(frozen=True, slots=True)
class GenerateCard:
    """Start generating a card from a captured image (raw image bytes)."""

    image: bytes


@dataclass(frozen=True, slots=True)
class ShowNewCard:
    """Stage a freshly generated card for the user to accept or discard."""

    card: Card


@dataclass(frozen=True, slots=True)
class AddCard:
    card: Card


@dataclass(frozen=True, slots=True)
class RemoveCard:
    card: Card


@dataclass(frozen=True, slots=True)
class DismissError:
    pass


Action = (
    SelectCard
    | DeselectCard
    | ShowCameraView
    | DismissCameraView
    | GenerateCard
    | ShowNewCard
    | AddCard
    | RemoveCard
    | DismissError
)
