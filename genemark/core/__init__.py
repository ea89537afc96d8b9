"""Marker and Gene data types."""

from .marker import MARKER_BYTES, MARKER_HEX_WIDTH, Marker
from .gene import MAX_MARKERS, Gene

__all__ = [
    "Marker",
    "MARKER_BYTES",
    "MARKER_HEX_WIDTH",
    "Gene",
    "MAX_MARKERS",
]
