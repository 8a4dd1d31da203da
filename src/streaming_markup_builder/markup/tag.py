"""Tag stack entries tracked by the emission engine."""

from dataclasses import dataclass

from .policy import TagClosingPolicy


@dataclass(eq=False)
class Tag:
    """A single open element on a builder's tag stack.

    ``depth`` is the stack size when the tag was pushed and never changes.
    The remaining flags are only touched by the builder: ``is_empty`` stays
    true until something forces the tag open, ``has_started`` and
    ``has_ended`` guard the one-time writes of the start and end forms.
    """

    name: str
    depth: int = 0
    close_policy: TagClosingPolicy = TagClosingPolicy.NORMAL
    is_empty: bool = True
    has_started: bool = False
    has_ended: bool = False

    def __post_init__(self) -> None:
        """Validate tag values."""
        if not self.name:
            raise ValueError("Tag name cannot be empty")
        if self.depth < 0:
            raise ValueError("Tag depth must be >= 0")
        if self.has_ended and not self.has_started:
            raise ValueError("Tag cannot be ended before it is started")

    @property
    def is_self_closing(self) -> bool:
        """Whether the start form should be written as ``<name/>``."""
        return self.is_empty and self.close_policy.is_self_closing

    @property
    def is_pending(self) -> bool:
        """Whether nothing has forced this tag open yet."""
        return self.is_empty and not self.has_ended
