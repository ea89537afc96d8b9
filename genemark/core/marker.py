"""Marker: one float32 value with a fixed-width hex text encoding."""

from __future__ import annotations

import string
from dataclasses import dataclass

import numpy as np

from genemark.utils.rng_manager import RNGManager
from genemark.utils.validation import (
    InvalidHexDigit,
    InvalidHexLength,
    UnexpectedByteCount,
)

MARKER_BYTES = 4
MARKER_HEX_WIDTH = 2 * MARKER_BYTES

_HEX_DIGITS = frozenset(string.hexdigits)
_BIG_ENDIAN_F32 = np.dtype(">f4")


@dataclass
class Marker:
    """A single scalar gene value.

    The value is kept as ``numpy.float32`` so that every bit pattern, NaN
    payloads included, survives ``encode``/``decode`` unchanged.

    Attributes:
        value: the float32 value
    """

    value: np.float32

    @classmethod
    def sample(cls, rng_manager: RNGManager) -> Marker:
        """New marker drawn from the standard normal distribution."""
        return cls(rng_manager.sample_standard_normal())

    @classmethod
    def from_value(cls, value: float) -> Marker:
        return cls(np.float32(value))

    def copy(self) -> Marker:
        return Marker(np.float32(self.value))

    def encode(self) -> str:
        """Big-endian bytes of the value as 8 lowercase hex characters."""
        raw = np.asarray(self.value, dtype=np.float32).astype(_BIG_ENDIAN_F32).tobytes()
        return raw.hex()

    @classmethod
    def decode(cls, text: str) -> Marker:
        """Inverse of :meth:`encode`.

        Raises:
            InvalidHexLength: odd number of characters
            InvalidHexDigit: a character pair is not a base-16 byte
            UnexpectedByteCount: the text does not hold exactly 4 bytes
        """
        if len(text) % 2:
            raise InvalidHexLength(
                f"Marker text must have an even length, got {len(text)}",
                text=text,
                length=len(text),
            )
        pairs = [text[i:i + 2] for i in range(0, len(text), 2)]
        for offset, pair in enumerate(pairs):
            if not set(pair) <= _HEX_DIGITS:
                raise InvalidHexDigit(
                    f"Invalid hex byte {pair!r} at offset {2 * offset}",
                    text=text,
                    offset=2 * offset,
                    pair=pair,
                )
        if len(pairs) != MARKER_BYTES:
            raise UnexpectedByteCount(
                f"Marker text must decode to {MARKER_BYTES} bytes, got {len(pairs)}",
                text=text,
                byte_count=len(pairs),
            )
        raw = bytes(int(pair, 16) for pair in pairs)
        value = np.frombuffer(raw, dtype=_BIG_ENDIAN_F32).astype(np.float32)[0]
        return cls(value)

    def __str__(self) -> str:
        return self.encode()


__all__ = ["Marker", "MARKER_BYTES", "MARKER_HEX_WIDTH"]
