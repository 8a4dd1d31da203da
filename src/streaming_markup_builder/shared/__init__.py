"""Shared utilities for streaming markup generation.

This module provides configuration objects, emission statistics, the error
hierarchy, and logging helpers used across the builder layers.
"""

from .config import (
    BuilderConfig,
    ConfigError,
    ConfigValidationError,
    PlaceholderPolicy,
)
from .errors import (
    EmptyStackError,
    InvalidArgumentError,
    InvalidStateError,
    MarkupBuilderError,
    SinkUnavailableError,
    SinkWriteError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import EmissionStatistics

__all__ = [
    "BuilderConfig",
    "ConfigError",
    "ConfigValidationError",
    "PlaceholderPolicy",
    "EmissionStatistics",
    "EmptyStackError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MarkupBuilderError",
    "SinkUnavailableError",
    "SinkWriteError",
    "CorrelationLogger",
    "get_logger",
]
