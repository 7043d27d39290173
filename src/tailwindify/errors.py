"""Error types raised by tailwindify."""

from __future__ import annotations

__all__ = ["TailwindifyError", "CSSParseError", "ConfigError", "SelectorSyntaxError"]


class TailwindifyError(Exception):
    """Base class for every error raised by tailwindify."""


class CSSParseError(TailwindifyError):
    """Raised when CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ConfigError(TailwindifyError):
    """Raised when a converter configuration file is unreadable or invalid."""


class SelectorSyntaxError(CSSParseError):
    """Raised when a selector is outside the supported selector grammar."""
