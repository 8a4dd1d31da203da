"""Streaming Markup Builder.

A fluent builder that writes well-formed XML and HTML straight to an output
stream, without building a document tree in memory.

Progressive API Disclosure:
- Level 1: Flavored builders - XmlBuilder, HtmlBuilder
- Level 2: Core engine - MarkupBuilder with TagClosingPolicy
- Level 3: Composition - child builders borrowing a parent's stream
- Level 4: Configuration - BuilderConfig presets and overrides
"""

__version__ = "0.1.0"
__author__ = "Streaming Markup Builder Team"

# Level 1 and 2: builders and closing policies
from .markup import HtmlBuilder, MarkupBuilder, TagClosingPolicy, XmlBuilder

# Configuration classes for advanced usage
from .shared.config import BuilderConfig, PlaceholderPolicy

# Error hierarchy and statistics
from .shared.errors import (
    EmptyStackError,
    InvalidArgumentError,
    InvalidStateError,
    MarkupBuilderError,
    SinkUnavailableError,
    SinkWriteError,
)
from .shared.result import EmissionStatistics

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Builders
    "MarkupBuilder",
    "XmlBuilder",
    "HtmlBuilder",
    "TagClosingPolicy",

    # Configuration
    "BuilderConfig",
    "PlaceholderPolicy",

    # Results and errors
    "EmissionStatistics",
    "MarkupBuilderError",
    "EmptyStackError",
    "InvalidArgumentError",
    "InvalidStateError",
    "SinkUnavailableError",
    "SinkWriteError",
]
