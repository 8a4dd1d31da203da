#!/usr/bin/env python3
"""
Quick Start Guide for the Streaming Markup Builder.

This example walks through the fluent API, closing policies, placeholder
bindings and composing builders that share one output stream.
"""

import io
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from streaming_markup_builder import (
    BuilderConfig,
    HtmlBuilder,
    MarkupBuilder,
    TagClosingPolicy,
    XmlBuilder,
)


def render_nav(parent: HtmlBuilder, links) -> None:
    """Render a navigation list into whatever ``parent`` is writing."""
    with HtmlBuilder(parent) as nav:
        nav.ul().class_("nav")
        for label, href in links:
            nav.li().a(href).text(label).end().end()


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - Streaming Markup Builder")
    print("=" * 45)

    # Step 1: Core builder and closing policies
    print("\nStep 1: Core builder")
    print("-" * 30)

    out = io.StringIO()
    builder = MarkupBuilder(out, config=BuilderConfig.pretty())
    builder.start("note").attr("id", "n1")
    builder.start("to").text("Tove").end()
    builder.start("separator", TagClosingPolicy.SELF)
    builder.start("body", TagClosingPolicy.PAIR).end()
    builder.done()
    print(out.getvalue().strip())

    # Step 2: Bindings
    print("\nStep 2: Bindings")
    print("-" * 30)

    out = io.StringIO()
    xml = XmlBuilder(out)
    xml.declaration().bind("user", "ada").bind("host", "example.com")
    xml.start("profile").attr("href", "https://${host}/u/${user}")
    xml.element("greeting", "Hello ${user} & welcome")
    xml.comment("unbound placeholders such as ${missing} pass through")
    xml.done()
    print(out.getvalue())

    # Step 3: Composition
    print("\nStep 3: Composition")
    print("-" * 30)

    out = io.StringIO()
    page = HtmlBuilder(out)
    page.doctype().html("en").head().title().text("Home").end().end()
    page.body()
    render_nav(page, [("Home", "/"), ("About", "/about")])
    page.p().text("Written straight to the stream.").end()
    page.done()
    print(out.getvalue())
    print(f"\nStatistics: {page.statistics.to_dict()}")


if __name__ == "__main__":
    quick_start_example()
