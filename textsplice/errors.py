"""Domain exceptions for text validation and CLI diagnostics."""

from __future__ import annotations


class TextValidationError(ValueError):
    """Raised when raw text cannot be parsed into the grammar model."""

    def __init__(self, detail: str) -> None:
        """Initialize a validation error with a human-readable detail."""

        super().__init__(detail)
        self.detail = detail


class InvalidCharacterError(TextValidationError):
    """Raised when a sentence contains a character outside every token class."""

    def __init__(self, character: str) -> None:
        """Initialize an error naming the offending character."""

        super().__init__(f"invalid character: {character!r}")
        self.character = character


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
