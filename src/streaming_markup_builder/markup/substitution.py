"""Flat ``${name}`` token substitution for text and attribute values.

Only the braced form is recognised. ``$${name}`` renders the literal
``${name}`` and a ``$`` that does not start a placeholder is left alone.
Placeholders without a binding are handled according to
:class:`~streaming_markup_builder.shared.config.PlaceholderPolicy`.
"""

from string import Template
from typing import Any, Mapping

from streaming_markup_builder.shared.config import PlaceholderPolicy


class TokenTemplate(Template):
    """:class:`string.Template` restricted to ``${name}`` placeholders."""

    pattern = r"""
    \$(?:
        (?P<escaped>\$)(?=\{)       |  # $${name} -> ${name}
        \{(?P<braced>[^{}]+)\}      |
        (?P<named>(?!))             |
        (?P<invalid>(?!))
    )
    """


class _BlankingBindings(dict):
    """Bindings view that resolves unknown names to an empty string."""

    def __missing__(self, key: str) -> str:
        return ""


def substitute(
    text: str,
    bindings: Mapping[str, Any],
    policy: PlaceholderPolicy = PlaceholderPolicy.KEEP,
) -> str:
    """Replace ``${name}`` placeholders in ``text`` with bound values.

    Args:
        text: Text possibly containing placeholders
        bindings: Name to value mapping; values are rendered with ``str()``
            and a ``None`` value counts as unbound
        policy: What to do with placeholders that have no binding

    Returns:
        Text with every resolvable placeholder replaced
    """
    if "$" not in text:
        return text

    resolved = {name: value for name, value in bindings.items() if value is not None}
    template = TokenTemplate(text)
    if policy is PlaceholderPolicy.REMOVE:
        return template.substitute(_BlankingBindings(resolved))
    return template.safe_substitute(resolved)
