"""Adapter around the caller-supplied output destination."""

from typing import Any, Callable

from streaming_markup_builder.shared.errors import SinkWriteError


class SinkAdapter:
    """Single ``write(text)`` capability over a stream or callable.

    The target is opened and closed by the caller. Any object with a
    ``write`` method (files, :class:`io.StringIO`, sockets wrapped in text
    streams) or any callable accepting a string is accepted.
    """

    def __init__(self, target: Any) -> None:
        """Initialize sink adapter.

        Args:
            target: Object with a ``write(str)`` method or a callable

        Raises:
            TypeError: If ``target`` can neither be written to nor called
        """
        write = getattr(target, "write", None)
        if callable(write):
            self._write: Callable[[str], Any] = write
        elif callable(target):
            self._write = target
        else:
            raise TypeError(
                f"Sink must have a write() method or be callable, "
                f"got {type(target).__name__}"
            )
        self.target = target
        self.characters_written = 0

    @classmethod
    def wrap(cls, target: Any) -> "SinkAdapter":
        """Return ``target`` unchanged if it is already an adapter."""
        if isinstance(target, cls):
            return target
        return cls(target)

    def write(self, text: str) -> int:
        """Write ``text`` to the target.

        Returns:
            Number of characters written

        Raises:
            SinkWriteError: If the target fails to accept the text
        """
        try:
            self._write(text)
        except (OSError, ValueError) as e:
            raise SinkWriteError(f"Writer for markup failed: {e}") from e
        self.characters_written += len(text)
        return len(text)

    def __repr__(self) -> str:
        return f"SinkAdapter({type(self.target).__name__})"
