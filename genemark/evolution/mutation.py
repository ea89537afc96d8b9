"""Mutation kinds and the strategies that choose between them."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping

from genemark.utils.rng_manager import RNGManager
from genemark.utils.validation import ValidationError


class MutationType(Enum):
    DELETE = "delete"
    DUPLICATION = "duplication"
    NEW = "new"
    REVERSAL = "reversal"
    SHIFT = "shift"


MUTATION_TYPES: tuple[MutationType, ...] = tuple(MutationType)

SelectionStrategy = Callable[[RNGManager], MutationType]


def uniform_selection(rng_manager: RNGManager) -> MutationType:
    """Pick each mutation kind with equal probability."""
    return MUTATION_TYPES[rng_manager.sample_uniform_index(len(MUTATION_TYPES))]


def fixed_selection(mutation_type: MutationType) -> SelectionStrategy:
    """Strategy that always returns ``mutation_type`` without consuming randomness."""

    def select(rng_manager: RNGManager) -> MutationType:
        return mutation_type

    return select


def _normalize_probs(probabilities: list[float]) -> list[float]:
    total = sum(probabilities)
    if total > 0:
        return [p / total for p in probabilities]
    if probabilities:
        return [1.0 / len(probabilities) for _ in probabilities]
    return []


def _parse_mutation_type(key: str | MutationType) -> MutationType:
    if isinstance(key, MutationType):
        return key
    try:
        return MutationType[str(key).upper()]
    except KeyError:
        raise ValidationError(
            "unknown_mutation_type",
            f"Unknown mutation type: {key!r}",
            key=key,
            allowed=tuple(t.name for t in MUTATION_TYPES),
        ) from None


def weighted_selection(mutation_probs: Mapping[str | MutationType, float]) -> SelectionStrategy:
    """Roulette selection over ``mutation_probs``.

    Keys are mutation type names (case-insensitive) or members; missing kinds
    get weight 0. All-zero weights fall back to uniform over the given keys.
    """
    parsed: dict[MutationType, float] = {}
    for key, weight in mutation_probs.items():
        weight = float(weight)
        if weight < 0:
            raise ValidationError(
                "negative_mutation_weight",
                f"Mutation weight for {key!r} must be non-negative, got {weight}",
                key=key,
                weight=weight,
            )
        parsed[_parse_mutation_type(key)] = weight
    if not parsed:
        return uniform_selection

    keys = [t for t in MUTATION_TYPES if t in parsed]
    weights = _normalize_probs([parsed[k] for k in keys])
    # rounding can leave r above the final cumulative sum
    fallback = [k for k, w in zip(keys, weights) if w > 0][-1]

    def select(rng_manager: RNGManager) -> MutationType:
        r = rng_manager.random()
        cumulative = 0.0
        selected = fallback
        for k, w in zip(keys, weights):
            cumulative += w
            if r < cumulative:
                selected = k
                break
        return selected

    return select


def selection_from_config(config: Mapping) -> SelectionStrategy:
    probs = config.get("mutation_probs") or {}
    if not probs:
        return uniform_selection
    return weighted_selection(probs)


__all__ = [
    "MutationType",
    "MUTATION_TYPES",
    "SelectionStrategy",
    "uniform_selection",
    "fixed_selection",
    "weighted_selection",
    "selection_from_config",
]
