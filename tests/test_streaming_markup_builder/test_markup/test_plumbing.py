"""Tests for the builder's collaborators.

Covers closing policies, tag records, attribute storage, escaping,
placeholder substitution, and the sink adapter.
"""

import io

import pytest

from streaming_markup_builder.markup import (
    AttributeStore,
    SinkAdapter,
    Tag,
    TagClosingPolicy,
    escape_markup,
    substitute,
)
from streaming_markup_builder.shared import PlaceholderPolicy, SinkWriteError


class TestTagClosingPolicy:
    """Test the closing policy table."""

    def test_normal_policy(self):
        """Test NORMAL self-closes when empty and pairs otherwise."""
        policy = TagClosingPolicy.NORMAL

        assert policy.is_self_closing
        assert not policy.is_always_self_closing
        assert policy.is_pair_closing

    def test_self_policy(self):
        """Test SELF always self-closes and never pairs."""
        policy = TagClosingPolicy.SELF

        assert policy.is_self_closing
        assert policy.is_always_self_closing
        assert not policy.is_pair_closing

    def test_pair_policy(self):
        """Test PAIR never self-closes."""
        policy = TagClosingPolicy.PAIR

        assert not policy.is_self_closing
        assert not policy.is_always_self_closing
        assert policy.is_pair_closing


class TestTag:
    """Test tag stack entries."""

    def test_new_tag_is_pending(self):
        """Test the initial flags of a new tag."""
        tag = Tag("div", depth=2)

        assert tag.is_empty
        assert tag.is_pending
        assert not tag.has_started
        assert not tag.has_ended
        assert tag.close_policy is TagClosingPolicy.NORMAL

    def test_self_closing_depends_on_content_and_policy(self):
        """Test is_self_closing for each policy."""
        assert Tag("br", close_policy=TagClosingPolicy.SELF).is_self_closing
        assert Tag("div").is_self_closing
        assert not Tag("p", close_policy=TagClosingPolicy.PAIR).is_self_closing
        assert not Tag("div", is_empty=False).is_self_closing

    def test_invalid_tags_raise_error(self):
        """Test validation of tag values."""
        with pytest.raises(ValueError, match="Tag name cannot be empty"):
            Tag("")
        with pytest.raises(ValueError, match="Tag depth must be >= 0"):
            Tag("a", depth=-1)
        with pytest.raises(ValueError, match="cannot be ended before it is started"):
            Tag("a", has_ended=True)


class TestAttributeStore:
    """Test attribute storage."""

    def test_preserves_insertion_order(self):
        """Test that attributes render in the order they were set."""
        store = AttributeStore()
        store.set("b", "2")
        store.set("a", "1")
        store.set("b", "3")

        assert list(store.items()) == [("b", "3"), ("a", "1")]
        assert len(store) == 2
        assert "a" in store

    def test_none_entries_are_not_rendered(self):
        """Test that None names and values are skipped."""
        store = AttributeStore()
        store.update([("href", None), ("id", "x"), (None, "y")])

        assert list(store.items()) == [("id", "x")]

    def test_update_from_mapping_and_clear(self):
        """Test bulk update and clearing."""
        store = AttributeStore()
        store.update({"id": "x", "class": "y"})

        assert store.get("class") == "y"
        assert store

        store.clear()

        assert not store
        assert store.get("id") is None


class TestEscapeMarkup:
    """Test reserved character escaping."""

    def test_escapes_five_entities(self):
        """Test the standard XML entities."""
        assert escape_markup("<a>&b") == "&lt;a&gt;&amp;b"
        assert escape_markup("\"it's\"") == "&quot;it&apos;s&quot;"

    def test_leaves_plain_text_alone(self):
        """Test that text without reserved characters is unchanged."""
        assert escape_markup("café ${x}") == "café ${x}"

    def test_escape_non_ascii(self):
        """Test numeric character references for non-ASCII text."""
        assert escape_markup("café <b>", escape_non_ascii=True) == "caf&#233; &lt;b&gt;"


class TestSubstitute:
    """Test ${name} placeholder substitution."""

    def test_replaces_bound_placeholders(self):
        """Test replacement of bound names."""
        assert substitute("Hello ${name}", {"name": "World"}) == "Hello World"
        assert substitute("${a}${b}", {"a": 1, "b": 2.5}) == "12.5"

    def test_unresolved_placeholders_pass_through(self):
        """Test the default KEEP policy."""
        assert substitute("Hello ${name}", {}) == "Hello ${name}"

    def test_unresolved_placeholders_removed(self):
        """Test the REMOVE policy."""
        result = substitute("Hello ${name}!", {}, PlaceholderPolicy.REMOVE)

        assert result == "Hello !"

    def test_none_value_counts_as_unbound(self):
        """Test that a None binding behaves like a missing one."""
        assert substitute("${x}", {"x": None}) == "${x}"
        assert substitute("${x}", {"x": None}, PlaceholderPolicy.REMOVE) == ""

    def test_escaped_placeholder(self):
        """Test that $${name} renders a literal placeholder."""
        assert substitute("$${name}", {"name": "World"}) == "${name}"

    def test_dollar_without_braces_is_literal(self):
        """Test that only the braced form is recognised."""
        assert substitute("cost $5 or $name", {"name": "x"}) == "cost $5 or $name"
        assert substitute("${}", {}) == "${}"

    def test_names_may_contain_punctuation(self):
        """Test names that are not Python identifiers."""
        assert substitute("${user.name}", {"user.name": "ann"}) == "ann"


class TestSinkAdapter:
    """Test the sink adapter."""

    def test_writes_to_stream(self):
        """Test writing to an object with a write method."""
        out = io.StringIO()
        sink = SinkAdapter(out)

        assert sink.write("<a/>") == 4
        assert out.getvalue() == "<a/>"
        assert sink.characters_written == 4

    def test_writes_to_callable(self):
        """Test writing to a plain callable."""
        parts = []
        sink = SinkAdapter(parts.append)
        sink.write("x")
        sink.write("y")

        assert parts == ["x", "y"]

    def test_rejects_unusable_target(self):
        """Test that targets without write() that are not callable are rejected."""
        with pytest.raises(TypeError, match="Sink must have a write"):
            SinkAdapter(42)

    def test_wrap_returns_existing_adapter(self):
        """Test that wrapping an adapter does not double-wrap it."""
        sink = SinkAdapter(io.StringIO())

        assert SinkAdapter.wrap(sink) is sink
        assert isinstance(SinkAdapter.wrap(io.StringIO()), SinkAdapter)

    def test_os_error_is_wrapped(self):
        """Test that I/O failures surface as SinkWriteError."""
        def failing_write(text):
            raise OSError("disk full")

        sink = SinkAdapter(failing_write)

        with pytest.raises(SinkWriteError, match="disk full") as exc_info:
            sink.write("x")

        assert isinstance(exc_info.value.__cause__, OSError)
        assert sink.characters_written == 0

    def test_closed_stream_is_wrapped(self):
        """Test that writing to a closed stream surfaces as SinkWriteError."""
        out = io.StringIO()
        out.close()

        with pytest.raises(SinkWriteError):
            SinkAdapter(out).write("x")
