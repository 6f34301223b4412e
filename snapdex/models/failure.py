"""
Failure classification for user-visible errors.

Only failures stored in AppState.error reach the user, as a dismissible
notification. Every such failure is a KnownError so it carries a kind, a
user-appropriate message, and an optional suggestion.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Generation pipeline failures
    GENERATION_FAILED = "generation_failed"

    # Persistence failures
    PERSISTENCE_FAILED = "persistence_failed"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "detail": self.detail,
            "suggestion": self.suggestion,
        }


class AIServiceError(KnownError):
    """
    Raised when a stage of the generation pipeline fails.

    Stages are "analyze_image", "generate_card_data" and "generate_image".
    """

    def __init__(self, stage: str, detail: str | None = None):
        self.stage = stage
        super().__init__(
            kind=FailureKind.GENERATION_FAILED,
            message=f"Card generation failed during {stage}",
            detail=detail,
            suggestion="Try taking the photo again.",
        )


class PersistenceError(KnownError):
    """Raised when the card collection could not be written to storage."""

    def __init__(self, operation: str, detail: str | None = None):
        self.operation = operation
        super().__init__(
            kind=FailureKind.PERSISTENCE_FAILED,
            message="Your collection could not be saved",
            detail=detail or operation,
            suggestion="Your changes are kept for this session. Try again later.",
        )
