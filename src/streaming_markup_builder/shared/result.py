"""Emission statistics for markup builders.

Each builder keeps a running tally of what it has pushed through its sink so
callers can inspect output volume without re-reading the stream.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class EmissionStatistics:
    """Counters describing the markup a single builder has emitted."""

    tags_started: int = 0
    tags_ended: int = 0
    self_closed_tags: int = 0
    text_nodes: int = 0
    raw_nodes: int = 0
    characters_written: int = 0

    @property
    def open_tags(self) -> int:
        """Number of tags whose start form was written but not their end."""
        return self.tags_started - self.tags_ended

    @property
    def self_closing_rate(self) -> float:
        """Fraction of started tags that were emitted in self-closing form."""
        if self.tags_started == 0:
            return 0.0
        return self.self_closed_tags / self.tags_started

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to a dictionary including derived values."""
        result = asdict(self)
        result["open_tags"] = self.open_tags
        result["self_closing_rate"] = self.self_closing_rate
        return result
