"""Exception types raised by chromatheme."""
from __future__ import annotations



class ChromathemeError(Exception):
    """Base class for every error raised by the package."""


class ParseError(ChromathemeError, ValueError):
    """Input could not be interpreted as a color."""

    def __init__(self, value, reason: str | None = None):
        self.value = value
        message = f"Cannot parse color from {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConversionError(ChromathemeError, ValueError):
    """Requested color space is not supported."""


class RangeError(ChromathemeError, ValueError):
    """A value lies outside its domain, or a sequence is not monotonic."""
