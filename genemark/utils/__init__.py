"""Random source and validation errors for genemark."""

from .rng_manager import RNGManager
from .validation import (
    GeneDecodeError,
    InvalidHexDigit,
    InvalidHexLength,
    InvalidMarkerCount,
    UnexpectedByteCount,
    ValidationError,
)

__all__ = [
    "RNGManager",
    "ValidationError",
    "InvalidMarkerCount",
    "GeneDecodeError",
    "InvalidHexLength",
    "InvalidHexDigit",
    "UnexpectedByteCount",
]
