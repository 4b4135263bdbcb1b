"""Error kinds raised by the svgdom codecs."""

from __future__ import annotations


class SvgError(ValueError):
    """Base class for malformed attribute values."""

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        return f"{self.message}: {self.source!r}"


class MalformedPathError(SvgError):
    """Raised when path data has an unknown command, a bad operand or a missing operand."""


class MalformedStyleError(SvgError):
    """Raised when a style declaration has no property name or no ':' separator."""


class MalformedTransformError(SvgError):
    """Raised when a transform list cannot be read."""
