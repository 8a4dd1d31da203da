"""Streaming markup emission for tag-based formats.

This module provides the deferred tag-emission engine and its collaborators:
closing policies, the tag stack entries, attribute storage, escaping,
placeholder substitution, and the sink adapter.

Key Components:
    MarkupBuilder: Core fluent builder writing directly to a sink
    XmlBuilder: Builder with XML declaration, comment and CDATA helpers
    HtmlBuilder: Builder with HTML element and attribute helpers
    TagClosingPolicy: How an element is terminated (NORMAL, SELF, PAIR)
"""

from .attributes import AttributeStore
from .builder import MarkupBuilder
from .escaping import escape_markup
from .html import VOID_ELEMENTS, HtmlBuilder, closing_policy_for
from .policy import TagClosingPolicy
from .sink import SinkAdapter
from .substitution import TokenTemplate, substitute
from .tag import Tag
from .xml import XmlBuilder

__all__ = [
    "AttributeStore",
    "HtmlBuilder",
    "MarkupBuilder",
    "SinkAdapter",
    "Tag",
    "TagClosingPolicy",
    "TokenTemplate",
    "VOID_ELEMENTS",
    "XmlBuilder",
    "closing_policy_for",
    "escape_markup",
    "substitute",
]
