"""Closing policies deciding how an element is terminated."""

from enum import Enum, auto


class TagClosingPolicy(Enum):
    """How a tag is closed once the builder decides to write it.

    ========  ======================  ==================  ======================
    Policy    Self-closes when empty  Always self-closes  Separate end tag
    ========  ======================  ==================  ======================
    NORMAL    yes                     no                  yes, when non-empty
    SELF      yes                     yes                 never
    PAIR      no                      no                  always
    ========  ======================  ==================  ======================
    """

    NORMAL = auto()
    SELF = auto()
    PAIR = auto()

    @property
    def is_always_self_closing(self) -> bool:
        """Tag is written as ``<name/>`` as soon as it is flushed."""
        return self is TagClosingPolicy.SELF

    @property
    def is_self_closing(self) -> bool:
        """Tag may be written as ``<name/>`` when it has no content."""
        return self is TagClosingPolicy.SELF or self is TagClosingPolicy.NORMAL

    @property
    def is_pair_closing(self) -> bool:
        """Tag may be written as ``<name>...</name>``."""
        return self is TagClosingPolicy.PAIR or self is TagClosingPolicy.NORMAL
