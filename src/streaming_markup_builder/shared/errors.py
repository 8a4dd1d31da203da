"""Exception hierarchy for markup builders.

Every error is a :class:`MarkupBuilderError` and also the closest built-in
exception type, so callers may catch either.
"""

from typing import Optional


class MarkupBuilderError(Exception):
    """Base exception for all builder failures."""


class SinkWriteError(MarkupBuilderError, IOError):
    """Raised when the underlying output sink fails to accept text."""


class EmptyStackError(MarkupBuilderError, IndexError):
    """Raised when a tag is closed while no tag is open."""


class InvalidArgumentError(MarkupBuilderError, ValueError):
    """Raised when a builder method receives malformed arguments."""


class SinkUnavailableError(MarkupBuilderError, RuntimeError):
    """Raised when a builder writes while a composed child holds its sink."""

    def __init__(
        self,
        message: str = "The current writer is in use by another builder.",
        owner: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.owner = owner


class InvalidStateError(MarkupBuilderError, RuntimeError):
    """Raised when the composition protocol is misused."""
