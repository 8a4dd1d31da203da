"""Core streaming markup builder.

This module implements the deferred tag-emission engine: callers chain
``start``/``attr``/``text``/``end`` calls and markup is written straight to
an output sink without building a document tree. A started tag is held on a
stack and only written when a later call forces it open, which is what lets
an element without content collapse into ``<name/>``.

Builders can be composed. A child builder constructed from a parent takes
over the parent's sink, writes at the parent's current nesting level, and
hands the sink back on :meth:`MarkupBuilder.done`.
"""

from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from streaming_markup_builder.shared import (
    BuilderConfig,
    EmissionStatistics,
    EmptyStackError,
    InvalidArgumentError,
    InvalidStateError,
    SinkUnavailableError,
    SinkWriteError,
    get_logger,
)

from .attributes import AttributeStore
from .escaping import escape_markup
from .policy import TagClosingPolicy
from .sink import SinkAdapter
from .substitution import substitute
from .tag import Tag

B = TypeVar("B", bound="MarkupBuilder")

_UNSET = object()


class MarkupBuilder:
    """Fluent builder writing tag-based markup directly to a sink.

    Every mutating method returns the builder itself so calls can be
    chained::

        builder.start("ul").start("li").text("one").end().end()

    Args:
        target: Output sink (anything with ``write(str)`` or a callable), or
            another builder to compose with
        config: Layout and escaping configuration; a composed child inherits
            its parent's configuration when omitted
        correlation_id: Optional correlation ID for request tracking
    """

    def __init__(
        self,
        target: Any,
        *,
        config: Optional[BuilderConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self._tag_stack: List[Tag] = []
        self._attributes = self.create_attribute_store()
        self._previous_builder: Optional["MarkupBuilder"] = None
        self._sink: Optional[SinkAdapter] = None
        self._bindings: Dict[str, Any] = {}
        self.base_depth = 0
        self.statistics = EmissionStatistics()

        if isinstance(target, MarkupBuilder):
            self.config = config or target.config
            self.correlation_id = correlation_id or target.correlation_id
            self.logger = get_logger(__name__, self.correlation_id, "markup_builder")
            self._compose_from(target)
        else:
            if target is None:
                raise InvalidArgumentError("Sink cannot be None")
            self.config = config or BuilderConfig()
            self.correlation_id = correlation_id
            self.logger = get_logger(__name__, self.correlation_id, "markup_builder")
            self._sink = SinkAdapter.wrap(target)
            self.logger.debug(
                "Created markup builder",
                extra={"builder": type(self).__name__, "sink": repr(self._sink)},
            )

    def _compose_from(self, parent: "MarkupBuilder") -> None:
        """Take over ``parent``'s sink at its current insertion point."""
        parent._ensure_writable()
        parent._write_current_tag()

        if parent._tag_stack:
            top = parent._tag_stack[-1]
            self.base_depth = 1 + top.depth + parent.base_depth
        else:
            self.base_depth = parent.base_depth

        self._sink = parent._sink
        parent._sink = None
        self._bindings = dict(parent._bindings)
        self._previous_builder = parent

        self.logger.debug(
            "Composed builder from parent",
            extra={
                "builder": type(self).__name__,
                "parent": type(parent).__name__,
                "base_depth": self.base_depth,
            },
        )

    # ------------------------------------------------------------------
    # Overridable hooks
    # ------------------------------------------------------------------

    def create_attribute_store(self) -> AttributeStore:
        """Create the store holding attributes for the pending tag."""
        return AttributeStore()

    def escape_markup(self, raw: str) -> str:
        """Escape reserved characters in text or attribute values."""
        return escape_markup(raw, self.config.escape_non_ascii)

    def indent(self, depth: int) -> str:
        """Layout whitespace written before a tag at stack depth ``depth``."""
        return self.config.newline + self.config.indent_unit * (self.base_depth + depth)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        """Number of tags currently open on this builder."""
        return len(self._tag_stack)

    @property
    def current_tag(self) -> Optional[Tag]:
        """Innermost open tag, or ``None`` when the stack is empty."""
        return self._tag_stack[-1] if self._tag_stack else None

    @property
    def attributes(self) -> AttributeStore:
        """Attributes that will be written on the pending tag."""
        return self._attributes

    @property
    def bindings(self) -> Dict[str, Any]:
        """Copy of the current placeholder bindings."""
        return dict(self._bindings)

    @property
    def is_writable(self) -> bool:
        """Whether this builder currently owns its sink."""
        return self._sink is not None

    @property
    def previous_builder(self) -> Optional["MarkupBuilder"]:
        """Builder this one was composed from, if any."""
        return self._previous_builder

    # ------------------------------------------------------------------
    # Public fluent API
    # ------------------------------------------------------------------

    def start(
        self: B, name: str, policy: TagClosingPolicy = TagClosingPolicy.NORMAL
    ) -> B:
        """Open a tag named ``name``.

        Nothing is written yet. A tag still pending on the stack is flushed
        first, so ``start("ul").start("li")`` writes ``<ul>`` before ``li``
        is pushed.

        Raises:
            InvalidArgumentError: If ``name`` is empty
        """
        if not name:
            raise InvalidArgumentError("Tag name cannot be empty")
        self._ensure_writable()
        self._write_current_tag()
        self._tag_stack.append(
            Tag(name, depth=len(self._tag_stack), close_policy=policy)
        )
        return self

    def attr(self: B, *attrs: Any) -> B:
        """Set attributes on the pending tag from alternating names and values.

        Raises:
            InvalidArgumentError: If an odd number of arguments is given
        """
        if len(attrs) % 2 != 0:
            raise InvalidArgumentError(
                f"attr() expects name/value pairs, got {len(attrs)} arguments"
            )
        for name, value in zip(attrs[::2], attrs[1::2]):
            self._attributes.set(name, value)
        return self

    def text(self: B, text: Optional[Any]) -> B:
        """Write escaped text content; ``None`` is ignored."""
        if text is not None:
            self._ensure_writable()
            self._write_current_tag()
            self._write(self.escape_markup(self._expand(str(text))))
            self.statistics.text_nodes += 1
        return self

    def raw(self: B, text: Optional[Any], expand: bool = True) -> B:
        """Write text without escaping; ``None`` is ignored.

        Args:
            text: Markup to write verbatim
            expand: Apply placeholder substitution before writing
        """
        if text is not None:
            self._ensure_writable()
            self._write_current_tag()
            value = str(text)
            self._write(self._expand(value) if expand else value)
            self.statistics.raw_nodes += 1
        return self

    def end(self: B, count: Optional[int] = None) -> B:
        """Close the innermost open tag, or up to ``count`` tags.

        With ``count`` the call stops quietly once the stack is empty.

        Raises:
            EmptyStackError: If called without ``count`` and no tag is open
        """
        if count is not None:
            while count > 0 and self._tag_stack:
                self.end()
                count -= 1
            return self

        try:
            tag = self._tag_stack[-1]
        except IndexError as e:
            raise EmptyStackError("end() called with no open tag") from e

        self._ensure_writable()
        self._write_start_tag(tag)
        self._write_end_tag(tag)
        self._tag_stack.pop()
        self._attributes.clear()
        return self

    def end_all(self: B) -> B:
        """Close every open tag."""
        while self._tag_stack:
            self.end()
        return self

    def bind(
        self: B,
        name: Union[str, Mapping[str, Any], Iterable[Tuple[str, Any]]],
        value: Any = _UNSET,
    ) -> B:
        """Bind a placeholder name, or several from a mapping or pairs."""
        if value is not _UNSET:
            self._bindings[name] = value  # type: ignore[index]
            return self

        if isinstance(name, str):
            raise InvalidArgumentError(f"bind() for {name!r} requires a value")
        items = name.items() if isinstance(name, Mapping) else name
        for key, item in items:
            self._bindings[key] = item
        return self

    def unbind(self: B, name: str) -> B:
        """Remove a binding; unknown names are ignored."""
        self._bindings.pop(name, None)
        return self

    def done(self) -> None:
        """Finish with the builder.

        Closes every open tag and, for a composed builder, hands the sink
        back to the builder it was composed from.

        Raises:
            InvalidStateError: If the parent already owns a sink again, or a
                builder composed from this one has not finished yet
        """
        self.end_all()

        previous = self._previous_builder
        if previous is not None:
            if previous._sink is not None:
                raise InvalidStateError(
                    "Parent builder already owns a writer; was done() called twice?"
                )
            if self._sink is None:
                raise InvalidStateError(
                    "Cannot return the writer while a nested builder still holds it"
                )
            previous._sink = self._sink
            self._sink = None

        self.logger.debug(
            "Builder done",
            extra={
                "builder": type(self).__name__,
                "returned_to_parent": previous is not None,
                "statistics": self.statistics.to_dict(),
            },
        )

    def nested(self, builder_class: Optional[Type[B]] = None, **kwargs: Any) -> B:
        """Compose a child builder writing at the current insertion point.

        Args:
            builder_class: Flavor of the child; defaults to this builder's class
            **kwargs: Extra keyword arguments for the child's constructor
        """
        cls = builder_class or type(self)
        return cls(self, **kwargs)  # type: ignore[return-value]

    def __enter__(self: B) -> B:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if exc_type is None:
            self.done()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self.depth}, "
            f"base_depth={self.base_depth}, writable={self.is_writable})"
        )

    # ------------------------------------------------------------------
    # Emission engine
    # ------------------------------------------------------------------

    def _write_current_tag(self) -> None:
        """Flush the pending tag, if any, and reset the attribute store."""
        if self._tag_stack:
            current = self._tag_stack[-1]
            if current.is_pending:
                always_self_closing = current.close_policy.is_always_self_closing
                current.is_empty = always_self_closing
                self._write_start_tag(current)
                if always_self_closing:
                    self.end()
        self._attributes.clear()

    def _write_start_tag(self, tag: Tag) -> None:
        if tag.has_started or tag.has_ended:
            return

        self_closing = tag.is_self_closing
        self._write(self.indent(tag.depth) + self._render_start_tag(tag.name, self_closing))
        tag.has_ended = self_closing
        tag.has_started = True

        self.statistics.tags_started += 1
        if self_closing:
            self.statistics.self_closed_tags += 1
            self.statistics.tags_ended += 1

    def _write_end_tag(self, tag: Tag) -> None:
        if tag.has_ended:
            return

        self._write(self.indent(tag.depth) + f"</{tag.name}>")
        tag.has_ended = True
        self.statistics.tags_ended += 1

    def _render_start_tag(self, name: str, close: bool) -> str:
        parts = [f"<{name}"]
        rendered = [
            self._render_attribute(attr_name, value)
            for attr_name, value in self._attributes.items()
        ]
        if rendered:
            parts.append(" ")
            parts.append(" ".join(rendered))
        parts.append("/>" if close else ">")
        return "".join(parts)

    def _render_attribute(self, name: Any, value: Any) -> str:
        quote = self.config.attribute_quote
        escaped = self.escape_markup(self._expand(str(value)))
        return f"{self._expand(str(name))}={quote}{escaped}{quote}"

    def _write_node(self, markup: str, indented: bool = True) -> None:
        """Write a complete node (comment, declaration, ...) at the insertion point."""
        self._ensure_writable()
        self._write_current_tag()
        if indented:
            markup = self.indent(self.depth) + markup
        self._write(markup)
        self.statistics.raw_nodes += 1

    def _expand(self, text: str) -> str:
        return substitute(text, self._bindings, self.config.placeholder_policy)

    def _ensure_writable(self) -> None:
        if self._sink is None:
            raise SinkUnavailableError(owner=type(self).__name__)

    def _write(self, text: str) -> None:
        self._ensure_writable()
        try:
            self._sink.write(text)  # type: ignore[union-attr]
        except SinkWriteError:
            self.logger.error(
                "Sink write failed",
                extra={"builder": type(self).__name__, "pending_tags": self.depth},
            )
            raise
        self.statistics.characters_written += len(text)
