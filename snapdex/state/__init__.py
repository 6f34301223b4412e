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
from snapdex.state.app_state import AppState, Listener, StateSnapshot

__all__ = [
    "Action",
    "AddCard",
    "AppState",
    "DeselectCard",
    "DismissCameraView",
    "DismissError",
    "GenerateCard",
    "Listener",
    "RemoveCard",
    "SelectCard",
    "ShowCameraView",
    "ShowNewCard",
    "StateSnapshot",
]
