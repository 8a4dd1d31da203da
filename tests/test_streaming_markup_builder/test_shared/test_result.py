"""Tests for emission statistics and the error hierarchy."""

import pytest

from streaming_markup_builder.shared import (
    EmissionStatistics,
    EmptyStackError,
    InvalidArgumentError,
    InvalidStateError,
    MarkupBuilderError,
    SinkUnavailableError,
    SinkWriteError,
)


class TestEmissionStatistics:
    """Test EmissionStatistics counters and derived values."""

    def test_defaults(self):
        """Test that a fresh instance has all counters at zero."""
        stats = EmissionStatistics()

        assert stats.tags_started == 0
        assert stats.open_tags == 0
        assert stats.self_closing_rate == 0.0

    def test_derived_values(self):
        """Test open tag count and self-closing rate."""
        stats = EmissionStatistics(tags_started=4, tags_ended=3, self_closed_tags=1)

        assert stats.open_tags == 1
        assert stats.self_closing_rate == 0.25

    def test_to_dict_includes_derived_values(self):
        """Test dictionary conversion."""
        data = EmissionStatistics(tags_started=2, tags_ended=2, text_nodes=1).to_dict()

        assert data["tags_started"] == 2
        assert data["text_nodes"] == 1
        assert data["open_tags"] == 0
        assert data["self_closing_rate"] == 0.0


class TestErrorHierarchy:
    """Test that builder errors also match the closest built-in type."""

    @pytest.mark.parametrize(
        "error_class, builtin",
        [
            (SinkWriteError, OSError),
            (EmptyStackError, IndexError),
            (InvalidArgumentError, ValueError),
            (SinkUnavailableError, RuntimeError),
            (InvalidStateError, RuntimeError),
        ],
    )
    def test_error_bases(self, error_class, builtin):
        """Test each error is both a MarkupBuilderError and a built-in."""
        assert issubclass(error_class, MarkupBuilderError)
        assert issubclass(error_class, builtin)

    def test_sink_unavailable_default_message(self):
        """Test the default message names the borrowed writer."""
        error = SinkUnavailableError(owner="MarkupBuilder")

        assert "in use by another builder" in str(error)
        assert error.owner == "MarkupBuilder"
