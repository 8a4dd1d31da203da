"""Generic XML flavor of the markup builder."""

from typing import Any, Optional

from streaming_markup_builder.shared import InvalidArgumentError, InvalidStateError

from .builder import MarkupBuilder
from .policy import TagClosingPolicy


class XmlBuilder(MarkupBuilder):
    """Markup builder with helpers for XML-only constructs.

    Example:
        >>> out = io.StringIO()
        >>> XmlBuilder(out).declaration().start("feed").namespace(
        ...     None, "http://www.w3.org/2005/Atom").element("title", "News").done()
    """

    def declaration(
        self,
        version: str = "1.0",
        encoding: Optional[str] = "UTF-8",
        standalone: Optional[bool] = None,
    ) -> "XmlBuilder":
        """Write the ``<?xml ...?>`` declaration.

        Raises:
            InvalidStateError: If anything was already written through this
                builder or it was composed from another builder
        """
        if (
            self.statistics.characters_written
            or self._tag_stack
            or self.previous_builder is not None
        ):
            raise InvalidStateError("XML declaration must start the document")

        parts = [f'<?xml version="{version}"']
        if encoding:
            parts.append(f' encoding="{encoding}"')
        if standalone is not None:
            parts.append(f' standalone="{"yes" if standalone else "no"}"')
        parts.append("?>")
        self._write_node("".join(parts), indented=False)
        return self

    def comment(self, text: str) -> "XmlBuilder":
        """Write ``<!-- text -->`` at the current nesting level.

        Raises:
            InvalidArgumentError: If the expanded text contains ``--``
        """
        body = self._expand(text)
        if "--" in body:
            raise InvalidArgumentError("Comment text cannot contain '--'")
        self._write_node(f"<!-- {body} -->")
        return self

    def cdata(self, text: str) -> "XmlBuilder":
        """Write ``text`` inside a CDATA section without escaping."""
        # A literal "]]>" has to be split across two sections
        body = self._expand(text).replace("]]>", "]]]]><![CDATA[>")
        self._write_node(f"<![CDATA[{body}]]>", indented=False)
        return self

    def processing_instruction(self, target: str, data: Optional[str] = None) -> "XmlBuilder":
        """Write ``<?target data?>`` at the current nesting level."""
        if not target or target.lower() == "xml":
            raise InvalidArgumentError(f"Invalid processing instruction target: {target!r}")
        body = f" {self._expand(data)}" if data else ""
        if "?>" in body:
            raise InvalidArgumentError("Processing instruction data cannot contain '?>'")
        self._write_node(f"<?{target}{body}?>")
        return self

    def element(
        self,
        name: str,
        text: Optional[Any] = None,
        *attrs: Any,
        policy: TagClosingPolicy = TagClosingPolicy.NORMAL,
    ) -> "XmlBuilder":
        """Write a complete element in one call.

        ``element("item", "x", "id", "1")`` is shorthand for
        ``start("item").attr("id", "1").text("x").end()``.
        """
        if len(attrs) % 2 != 0:
            raise InvalidArgumentError(
                f"element() expects name/value pairs, got {len(attrs)} attribute arguments"
            )
        return self.start(name, policy).attr(*attrs).text(text).end()

    def namespace(self, prefix: Optional[str], uri: str) -> "XmlBuilder":
        """Declare a namespace on the pending tag; ``None`` declares the default."""
        return self.attr(f"xmlns:{prefix}" if prefix else "xmlns", uri)
