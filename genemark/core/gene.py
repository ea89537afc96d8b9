"""Gene: an ordered sequence of markers led by an influence marker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from genemark.core.marker import MARKER_HEX_WIDTH, Marker
from genemark.utils.rng_manager import RNGManager
from genemark.utils.validation import InvalidHexLength, InvalidMarkerCount

if TYPE_CHECKING:  # pragma: no cover
    from genemark.evolution.mutation import SelectionStrategy
    from genemark.evolution.operators import MutationRecord

# Declared marker counts are unsigned 16-bit.
MAX_MARKERS = 0xFFFF


@dataclass(eq=False)
class Gene:
    """Ordered markers; storage index 0 holds the influence marker.

    Positional access skips the influence slot: logical position ``p`` lives
    at storage index ``p + 1``.

    Attributes:
        num_markers: declared number of (non-influence) markers
        markers: stored markers, influence first
    """

    num_markers: int
    markers: list[Marker] = field(default_factory=list)

    @classmethod
    def create(cls, num_markers: int, rng_manager: RNGManager) -> Gene:
        """Gene with ``num_markers + 1`` freshly sampled markers.

        Raises:
            InvalidMarkerCount: ``num_markers`` is below 1 or above MAX_MARKERS
        """
        if num_markers < 1:
            raise InvalidMarkerCount(
                f"A gene needs at least one marker, got {num_markers}",
                num_markers=num_markers,
            )
        if num_markers > MAX_MARKERS:
            raise InvalidMarkerCount(
                f"A gene holds at most {MAX_MARKERS} markers, got {num_markers}",
                num_markers=num_markers,
            )
        markers = [Marker.sample(rng_manager) for _ in range(num_markers + 1)]
        return cls(num_markers=num_markers, markers=markers)

    def get_influence(self) -> np.float32:
        return self.markers[0].value

    def get_marker(self, position: int) -> Optional[np.float32]:
        """Value at logical ``position`` or None when out of range."""
        index = position + 1
        if position < 0 or index >= len(self.markers):
            return None
        return self.markers[index].value

    def get_markers(self) -> list[np.float32]:
        return [m.value for m in self.markers[1:]]

    def encode(self) -> str:
        return "".join(m.encode() for m in self.markers)

    @classmethod
    def decode(cls, text: str) -> Gene:
        """Rebuild a gene from :meth:`encode` output.

        ``num_markers`` is set to the number of decoded chunks, influence
        included, so a decoded gene reports one marker more than the gene
        that produced the text. Marker values and text are preserved.
        """
        if len(text) % MARKER_HEX_WIDTH:
            raise InvalidHexLength(
                f"Gene text length must be a multiple of {MARKER_HEX_WIDTH}, got {len(text)}",
                text=text,
                length=len(text),
            )
        if not text:
            raise InvalidMarkerCount("Gene text is empty", num_markers=0)
        markers = [
            Marker.decode(text[i:i + MARKER_HEX_WIDTH])
            for i in range(0, len(text), MARKER_HEX_WIDTH)
        ]
        return cls(num_markers=len(markers), markers=markers)

    @staticmethod
    def is_equal(left: Gene, right: Gene) -> bool:
        """Compare visible markers pairwise; the influence marker is ignored."""
        if len(left.markers) != len(right.markers):
            return False
        return all(a == b for a, b in zip(left.get_markers(), right.get_markers()))

    def set_marker(self, index: int, value: float) -> None:
        """Replace the value at storage ``index`` (influence included)."""
        self.markers[index].value = np.float32(value)

    def mutate(
        self,
        rng_manager: RNGManager,
        strategy: Optional[SelectionStrategy] = None,
    ) -> MutationRecord:
        from genemark.evolution.operators import mutate

        return mutate(self, rng_manager, strategy)

    def __str__(self) -> str:
        return self.encode()


__all__ = ["Gene", "MAX_MARKERS"]
