"""Exception hierarchy for failed conversions."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every fatal conversion failure."""


class ConfigError(ConversionError, ValueError):
    """Raised when the conversion request or site settings are invalid."""


class ParseError(ConversionError):
    """Raised when the Markdown parser cannot process the source text."""


class ThemeLoadError(ConversionError):
    """Raised when the requested theme CSS cannot be found."""


class MinifyError(ConversionError):
    """Raised when the minifier rejects the assembled HTML."""


__all__ = [
    "ConfigError",
    "ConversionError",
    "MinifyError",
    "ParseError",
    "ThemeLoadError",
]
