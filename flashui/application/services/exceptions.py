"""Custom exceptions for FlashUI services."""


class FlashUIError(Exception):
    """Base class for all FlashUI errors."""


class SessionNotFoundError(FlashUIError, ValueError):
    """Raised when a requested session does not exist in the store."""


class ArtifactNotFoundError(FlashUIError, ValueError):
    """Raised when a requested artifact cannot be found in its session."""


class InvalidArtifactTransitionError(FlashUIError):
    """Raised when an update would move an artifact backwards.

    This covers a settled artifact returning to streaming, streamed content
    shrinking or being rewritten, and a transform that changes the artifact id.
    """


class InvalidStateError(FlashUIError):
    """Raised when an operation is not allowed in the orchestrator's current state."""


class GenerationInProgressError(InvalidStateError):
    """Raised when a new submission arrives while another is still running."""


class LLMResponseError(FlashUIError):
    """Raised when the LLM returns a structurally invalid response."""
