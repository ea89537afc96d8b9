"""Gene mutation engine.

``mutate`` applies exactly one structural edit per call:

- DELETE: zero the marker at a random index
- DUPLICATION: copy a random marker over a random non-influence marker
- NEW: resample a random marker
- REVERSAL: swap a random marker with a random non-influence marker
- SHIFT: permute the whole sequence, influence included

The first index is drawn over the full sequence, influence included. Second
indices exclude the influence slot and may equal the first one, in which case
the edit is a no-op. The sequence length never changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from genemark.core.marker import Marker
from genemark.evolution.mutation import MutationType, SelectionStrategy, uniform_selection
from genemark.utils.rng_manager import RNGManager

if TYPE_CHECKING:  # pragma: no cover
    from genemark.core.gene import Gene


@dataclass(frozen=True)
class MutationRecord:
    """What a single ``mutate`` call did.

    Attributes:
        kind: applied mutation kind
        target: first storage index drawn
        secondary: DUPLICATION destination or REVERSAL partner, if any
        permutation: SHIFT ordering; new slot ``i`` holds old slot ``permutation[i]``
    """

    kind: MutationType
    target: int
    secondary: Optional[int] = None
    permutation: Optional[tuple[int, ...]] = None

    @property
    def is_noop(self) -> bool:
        if self.kind in (MutationType.DUPLICATION, MutationType.REVERSAL):
            return self.secondary is None or self.secondary == self.target
        if self.kind is MutationType.SHIFT and self.permutation is not None:
            return list(self.permutation) == sorted(self.permutation)
        return False


def _non_influence_index(gene: Gene, rng_manager: RNGManager) -> Optional[int]:
    # a decoded single-chunk gene has no slot besides the influence marker
    if len(gene.markers) < 2:
        return None
    return rng_manager.sample_uniform_index_from(1, len(gene.markers))


def mutate(
    gene: Gene,
    rng_manager: RNGManager,
    strategy: Optional[SelectionStrategy] = None,
) -> MutationRecord:
    """Apply one randomly chosen mutation to ``gene`` in place."""
    select = strategy or uniform_selection
    mutation_type = select(rng_manager)
    target = rng_manager.sample_uniform_index(len(gene.markers))

    if mutation_type is MutationType.DELETE:
        gene.set_marker(target, 0.0)
        record = MutationRecord(mutation_type, target)

    elif mutation_type is MutationType.DUPLICATION:
        dup_target = _non_influence_index(gene, rng_manager)
        if dup_target is not None:
            gene.set_marker(dup_target, gene.markers[target].value)
        record = MutationRecord(mutation_type, target, secondary=dup_target)

    elif mutation_type is MutationType.NEW:
        gene.set_marker(target, Marker.sample(rng_manager).value)
        record = MutationRecord(mutation_type, target)

    elif mutation_type is MutationType.REVERSAL:
        swap_target = _non_influence_index(gene, rng_manager)
        if swap_target is not None:
            swap_value = gene.markers[swap_target].value
            gene.set_marker(swap_target, gene.markers[target].value)
            gene.set_marker(target, swap_value)
        record = MutationRecord(mutation_type, target, secondary=swap_target)

    elif mutation_type is MutationType.SHIFT:
        order = rng_manager.permutation(len(gene.markers))
        gene.markers[:] = [gene.markers[i] for i in order]
        record = MutationRecord(mutation_type, target, permutation=tuple(order))

    else:  # pragma: no cover - closed enum
        raise ValueError(f"Unsupported mutation type: {mutation_type!r}")

    logging.debug(
        "Applied %s mutation (target=%d, secondary=%s)",
        mutation_type.name,
        target,
        record.secondary,
    )
    return record


__all__ = ["MutationRecord", "mutate"]
