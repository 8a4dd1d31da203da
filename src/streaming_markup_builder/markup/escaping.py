"""Escaping of reserved markup characters."""

from xml.sax.saxutils import escape

# ``escape`` always handles &, < and >
_QUOTE_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
}


def escape_markup(text: str, escape_non_ascii: bool = False) -> str:
    """Replace reserved characters with their XML entity forms.

    Args:
        text: Raw text to escape
        escape_non_ascii: Also write characters above U+007F as decimal
            character references (``&#233;``)

    Returns:
        Escaped text safe to place in element content or a quoted attribute
    """
    escaped = escape(text, _QUOTE_ENTITIES)
    if escape_non_ascii:
        escaped = escaped.encode("ascii", "xmlcharrefreplace").decode("ascii")
    return escaped
