"""Configuration classes for streaming markup generation.

This module provides immutable configuration objects that control how a
builder lays out and escapes the markup it writes.
"""

import json
from dataclasses import dataclass, fields, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional

_VALID_NEWLINES = ("", "\n", "\r\n")
_VALID_QUOTES = ('"', "'")


class PlaceholderPolicy(Enum):
    """How ``${key}`` placeholders without a binding are rendered."""

    KEEP = auto()     # Leave the placeholder in the output untouched
    REMOVE = auto()   # Replace the placeholder with an empty string


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class BuilderConfig:
    """Layout and escaping configuration shared by a chain of builders.

    Every start and end tag is preceded by ``newline`` followed by
    ``indent_unit`` repeated once per nesting level. A child builder created
    from a parent inherits the parent's configuration unless one is given.
    """

    indent_unit: str = "\t"
    newline: str = "\n"
    placeholder_policy: PlaceholderPolicy = PlaceholderPolicy.KEEP
    escape_non_ascii: bool = False
    attribute_quote: str = '"'

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate builder configuration."""
        if self.indent_unit.strip():
            raise ValueError("indent_unit must contain only whitespace")
        if self.newline not in _VALID_NEWLINES:
            raise ValueError(f"newline must be one of {list(_VALID_NEWLINES)!r}")
        if self.attribute_quote not in _VALID_QUOTES:
            raise ValueError(
                f"attribute_quote must be one of {list(_VALID_QUOTES)!r}"
            )
        if not isinstance(self.placeholder_policy, PlaceholderPolicy):
            raise ValueError("placeholder_policy must be a PlaceholderPolicy")

    def override(self, **kwargs: Any) -> "BuilderConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New BuilderConfig instance with overrides applied

        Example:
            >>> config = BuilderConfig()
            >>> new_config = config.override(indent_unit="  ")
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration field(s): {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        result: Dict[str, Any] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Enum):
                value = value.name
            result[field.name] = value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuilderConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data

        Returns:
            BuilderConfig instance created from dictionary
        """
        values = dict(data)
        policy = values.get("placeholder_policy")
        if isinstance(policy, str):
            try:
                values["placeholder_policy"] = PlaceholderPolicy[policy]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown placeholder policy: {policy}",
                    field_name="placeholder_policy",
                    suggestions=[p.name for p in PlaceholderPolicy],
                ) from e

        try:
            return cls(**values)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    @classmethod
    def from_json(cls, json_str: str) -> "BuilderConfig":
        """Create configuration from JSON string.

        Args:
            json_str: JSON string containing configuration data

        Returns:
            BuilderConfig instance created from JSON
        """
        data = json.loads(json_str)
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def pretty(cls, indent_width: int = 2) -> "BuilderConfig":
        """Create configuration preset indenting with spaces."""
        if indent_width < 0:
            raise ValueError("indent_width must be >= 0")
        return cls(
            indent_unit=" " * indent_width,
            name="pretty",
            description=f"One tag per line, indented by {indent_width} spaces",
        )

    @classmethod
    def compact(cls) -> "BuilderConfig":
        """Create configuration preset without any layout whitespace."""
        return cls(
            indent_unit="",
            newline="",
            name="compact",
            description="Markup written on a single line without indentation",
        )

    @classmethod
    def strict_ascii(cls) -> "BuilderConfig":
        """Create configuration preset that keeps output 7-bit clean."""
        return cls(
            escape_non_ascii=True,
            name="strict_ascii",
            description="Non-ASCII characters written as numeric references",
        )
