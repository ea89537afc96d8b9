"""Validation errors raised by genemark.

Every error carries a machine-readable ``error_type``, a human message and a
``details`` mapping with the offending values.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Base error: ``ValidationError(error_type, message, **details)``."""

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details: dict[str, Any] = dict(details)

    def __str__(self) -> str:
        return f"[{self.error_type}] {self.message}"


class InvalidMarkerCount(ValidationError):
    """A gene was requested with an unusable number of markers."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("invalid_marker_count", message, **details)


class GeneDecodeError(ValidationError):
    """Text could not be decoded into a Marker or Gene."""


class InvalidHexLength(GeneDecodeError):
    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("invalid_hex_length", message, **details)


class InvalidHexDigit(GeneDecodeError):
    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("invalid_hex_digit", message, **details)


class UnexpectedByteCount(GeneDecodeError):
    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("unexpected_byte_count", message, **details)


__all__ = [
    "ValidationError",
    "InvalidMarkerCount",
    "GeneDecodeError",
    "InvalidHexLength",
    "InvalidHexDigit",
    "UnexpectedByteCount",
]
