"""Seedable random source shared by marker sampling and mutation.

All randomness in genemark flows through an explicit ``RNGManager`` handle so
that runs are reproducible from a seed. A manager is not thread-safe; give
each worker its own manager via :meth:`RNGManager.spawn`.
"""

from __future__ import annotations

import copy
from typing import Any, MutableSequence

import numpy as np


class RNGManager:
    """Thin wrapper around a PCG64 ``numpy.random.Generator``."""

    def __init__(self, seed: int | np.random.SeedSequence | None = None) -> None:
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.Generator(np.random.PCG64(self._seed_seq))

    @property
    def seed(self) -> int:
        """Root entropy; equals the constructor seed when one was given."""
        return int(self._seed_seq.entropy)

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def sample_standard_normal(self) -> np.float32:
        return np.float32(self._rng.standard_normal(dtype=np.float32))

    def sample_uniform_index(self, n: int) -> int:
        """Uniform integer in ``[0, n)``."""
        return self.sample_uniform_index_from(0, n)

    def sample_uniform_index_from(self, low: int, n: int) -> int:
        """Uniform integer in ``[low, n)``."""
        if n <= low:
            raise ValueError(f"Empty index range [{low}, {n})")
        return int(self._rng.integers(low, n))

    def random(self) -> float:
        return float(self._rng.random())

    def shuffle(self, sequence: MutableSequence[Any]) -> None:
        """Shuffle ``sequence`` in place."""
        self._rng.shuffle(sequence)

    def permutation(self, n: int) -> list[int]:
        return [int(i) for i in self._rng.permutation(n)]

    def get_state(self) -> dict[str, Any]:
        return copy.deepcopy(self._rng.bit_generator.state)

    def set_state(self, state: dict[str, Any]) -> None:
        self._rng.bit_generator.state = copy.deepcopy(state)

    def spawn(self, n: int) -> list["RNGManager"]:
        """Independent child managers, e.g. one per worker thread."""
        return [RNGManager(child) for child in self._seed_seq.spawn(n)]


__all__ = ["RNGManager"]
