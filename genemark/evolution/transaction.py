"""Transactional mutation of a single gene.

A GeneTransaction lets a caller try a series of mutations and then keep or
discard them:
- On begin(), snapshots the gene's markers and the RNGManager state
- mutate() applies one mutation and records it
- On commit(), keeps the edits and returns the recorded mutations
- On rollback(), restores markers and RNG state so the next draw repeats
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from genemark.core.gene import Gene
from genemark.core.marker import Marker
from genemark.evolution.mutation import SelectionStrategy
from genemark.evolution.operators import MutationRecord, mutate
from genemark.utils.rng_manager import RNGManager


@dataclass
class GeneTransaction:
    gene: Gene
    rng_manager: RNGManager
    records: list[MutationRecord] = field(default_factory=list)

    _marker_snapshot: Optional[list[Marker]] = None
    _rng_state_snapshot: Optional[dict[str, Any]] = None

    @property
    def active(self) -> bool:
        return self._marker_snapshot is not None

    def begin(self) -> None:
        """Begin a transaction by snapshotting markers and RNG state."""
        self._marker_snapshot = [m.copy() for m in self.gene.markers]
        self._rng_state_snapshot = self.rng_manager.get_state()
        self.records.clear()

    def mutate(self, strategy: Optional[SelectionStrategy] = None) -> MutationRecord:
        if not self.active:
            raise RuntimeError("GeneTransaction.mutate() called before begin()")
        record = mutate(self.gene, self.rng_manager, strategy)
        self.records.append(record)
        return record

    def rollback(self) -> None:
        """Discard applied mutations and restore RNG state."""
        if self._marker_snapshot is not None:
            self.gene.markers[:] = self._marker_snapshot
            logging.info("Rolled back %d gene mutation(s)", len(self.records))
        if self._rng_state_snapshot is not None:
            self.rng_manager.set_state(self._rng_state_snapshot)
        self._reset()

    def commit(self) -> list[MutationRecord]:
        """Keep applied mutations and return their records."""
        if not self.records:
            logging.warning("Committing gene transaction with no mutations")
        committed = list(self.records)
        self._reset()
        return committed

    def _reset(self) -> None:
        self._marker_snapshot = None
        self._rng_state_snapshot = None
        self.records.clear()

    def __enter__(self) -> GeneTransaction:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()


__all__ = ["GeneTransaction"]
