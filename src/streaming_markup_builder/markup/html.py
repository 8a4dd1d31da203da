"""HTML flavor of the markup builder.

Void elements (``br``, ``img``, ...) are started with
:attr:`TagClosingPolicy.SELF` so they are written as ``<br/>`` as soon as the
next call arrives. Every other element uses :attr:`TagClosingPolicy.PAIR`,
since browsers do not accept ``<div/>`` as an empty element.
"""

from typing import Any, Optional

from .builder import MarkupBuilder
from .policy import TagClosingPolicy

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


def closing_policy_for(name: str) -> TagClosingPolicy:
    """Closing policy an HTML element named ``name`` must be written with."""
    if name.lower() in VOID_ELEMENTS:
        return TagClosingPolicy.SELF
    return TagClosingPolicy.PAIR


class HtmlBuilder(MarkupBuilder):
    """Markup builder with element and attribute helpers for HTML."""

    def doctype(self) -> "HtmlBuilder":
        """Write the HTML5 ``<!DOCTYPE html>`` declaration."""
        self._write_node("<!DOCTYPE html>", indented=False)
        return self

    def tag(self, name: str) -> "HtmlBuilder":
        """Start ``name`` with the closing policy HTML requires for it."""
        return self.start(name, closing_policy_for(name))

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def html(self, lang: Optional[str] = None) -> "HtmlBuilder":
        self.tag("html")
        if lang:
            self.attr("lang", lang)
        return self

    def head(self) -> "HtmlBuilder":
        return self.tag("head")

    def title(self) -> "HtmlBuilder":
        return self.tag("title")

    def meta(self) -> "HtmlBuilder":
        return self.tag("meta")

    def link(self, rel: Optional[str] = None, href: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("link").attr("rel", rel, "href", href)

    def script(self, src: Optional[str] = None) -> "HtmlBuilder":
        """Start a script element; written paired even without a body."""
        return self.tag("script").attr("src", src)

    def style(self) -> "HtmlBuilder":
        return self.tag("style")

    def body(self) -> "HtmlBuilder":
        return self.tag("body")

    # ------------------------------------------------------------------
    # Text-level and grouping content
    # ------------------------------------------------------------------

    def div(self) -> "HtmlBuilder":
        return self.tag("div")

    def span(self) -> "HtmlBuilder":
        return self.tag("span")

    def p(self) -> "HtmlBuilder":
        return self.tag("p")

    def a(self, href: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("a").attr("href", href)

    def h1(self) -> "HtmlBuilder":
        return self.tag("h1")

    def h2(self) -> "HtmlBuilder":
        return self.tag("h2")

    def h3(self) -> "HtmlBuilder":
        return self.tag("h3")

    def h4(self) -> "HtmlBuilder":
        return self.tag("h4")

    def h5(self) -> "HtmlBuilder":
        return self.tag("h5")

    def h6(self) -> "HtmlBuilder":
        return self.tag("h6")

    def ul(self) -> "HtmlBuilder":
        return self.tag("ul")

    def ol(self) -> "HtmlBuilder":
        return self.tag("ol")

    def li(self) -> "HtmlBuilder":
        return self.tag("li")

    def pre(self) -> "HtmlBuilder":
        return self.tag("pre")

    def code(self) -> "HtmlBuilder":
        return self.tag("code")

    def em(self) -> "HtmlBuilder":
        return self.tag("em")

    def strong(self) -> "HtmlBuilder":
        return self.tag("strong")

    def br(self) -> "HtmlBuilder":
        return self.tag("br")

    def hr(self) -> "HtmlBuilder":
        return self.tag("hr")

    def img(self, src: Optional[str] = None, alt: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("img").attr("src", src, "alt", alt)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def table(self) -> "HtmlBuilder":
        return self.tag("table")

    def thead(self) -> "HtmlBuilder":
        return self.tag("thead")

    def tbody(self) -> "HtmlBuilder":
        return self.tag("tbody")

    def tr(self) -> "HtmlBuilder":
        return self.tag("tr")

    def th(self) -> "HtmlBuilder":
        return self.tag("th")

    def td(self) -> "HtmlBuilder":
        return self.tag("td")

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def form(self, action: Optional[str] = None, method: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("form").attr("action", action, "method", method)

    def label(self, for_: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("label").attr("for", for_)

    def input(
        self,
        type_: Optional[str] = None,
        name: Optional[str] = None,
        value: Optional[Any] = None,
    ) -> "HtmlBuilder":
        return self.tag("input").attr("type", type_, "name", name, "value", value)

    def textarea(self, name: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("textarea").attr("name", name)

    def select(self, name: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("select").attr("name", name)

    def option(self, value: Optional[Any] = None, selected: bool = False) -> "HtmlBuilder":
        self.tag("option").attr("value", value)
        if selected:
            self.attr("selected", "selected")
        return self

    def button(self, type_: Optional[str] = None) -> "HtmlBuilder":
        return self.tag("button").attr("type", type_)

    # ------------------------------------------------------------------
    # Attribute helpers, applied to the pending tag
    # ------------------------------------------------------------------

    def id_(self, value: str) -> "HtmlBuilder":
        return self.attr("id", value)

    def class_(self, *names: str) -> "HtmlBuilder":
        """Set the ``class`` attribute from one or more class names."""
        return self.attr("class", " ".join(n for n in names if n))

    def href(self, value: str) -> "HtmlBuilder":
        return self.attr("href", value)

    def src(self, value: str) -> "HtmlBuilder":
        return self.attr("src", value)

    def alt(self, value: str) -> "HtmlBuilder":
        return self.attr("alt", value)

    def title_attr(self, value: str) -> "HtmlBuilder":
        return self.attr("title", value)

    def style_attr(self, value: str) -> "HtmlBuilder":
        return self.attr("style", value)

    def name(self, value: str) -> "HtmlBuilder":
        return self.attr("name", value)

    def type_(self, value: str) -> "HtmlBuilder":
        return self.attr("type", value)

    def value(self, value: Any) -> "HtmlBuilder":
        return self.attr("value", value)

    def data(self, key: str, value: Any) -> "HtmlBuilder":
        """Set a ``data-<key>`` attribute."""
        return self.attr(f"data-{key}", value)
