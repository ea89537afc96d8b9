"""Mutation engine for genemark genes."""

from .mutation import (
    MUTATION_TYPES,
    MutationType,
    fixed_selection,
    selection_from_config,
    uniform_selection,
    weighted_selection,
)
from .operators import MutationRecord, mutate
from .transaction import GeneTransaction

__all__ = [
    "MutationType",
    "MUTATION_TYPES",
    "uniform_selection",
    "fixed_selection",
    "weighted_selection",
    "selection_from_config",
    "MutationRecord",
    "mutate",
    "GeneTransaction",
]
