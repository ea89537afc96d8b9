"""Configuration presets.

Configuration is a plain dict. Recognised keys:
- num_markers: declared marker count for new genes
- mutation_probs: mapping of mutation type name to weight; empty means uniform
- seed: RNG seed, None for OS entropy
"""

from __future__ import annotations

import copy
from typing import Any, Mapping, Optional

from genemark.core.gene import Gene
from genemark.utils.rng_manager import RNGManager
from genemark.utils.validation import ValidationError

DEFAULT_CONFIG: dict[str, Any] = {
    "num_markers": 2,
    "mutation_probs": {},
    "seed": None,
}

PRESET_MINIMAL: dict[str, Any] = {
    "num_markers": 1,
    "mutation_probs": {},
    "seed": None,
}

PRESET_STANDARD: dict[str, Any] = {
    "num_markers": 8,
    "mutation_probs": {},
    "seed": None,
}

PRESET_RESEARCH: dict[str, Any] = {
    "num_markers": 32,
    "mutation_probs": {
        "delete": 0.2,
        "duplication": 0.2,
        "new": 0.2,
        "reversal": 0.2,
        "shift": 0.2,
    },
    "seed": 1234,
}


def merge_config(overrides: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Defaults updated with ``overrides``; unknown keys are rejected."""
    overrides = dict(overrides or {})
    extras = [k for k in overrides if k not in DEFAULT_CONFIG]
    if extras:
        raise ValidationError(
            "unknown_config_key",
            f"Unknown configuration keys: {sorted(extras)}",
            extras=tuple(sorted(extras)),
        )
    merged = copy.deepcopy(DEFAULT_CONFIG)
    merged.update(copy.deepcopy(overrides))
    return merged


def gene_from_config(
    config: Mapping[str, Any],
    rng_manager: Optional[RNGManager] = None,
) -> Gene:
    if rng_manager is None:
        rng_manager = RNGManager(seed=config.get("seed"))
    num_markers = int(config.get("num_markers", DEFAULT_CONFIG["num_markers"]))
    return Gene.create(num_markers, rng_manager)


__all__ = [
    "DEFAULT_CONFIG",
    "PRESET_MINIMAL",
    "PRESET_STANDARD",
    "PRESET_RESEARCH",
    "merge_config",
    "gene_from_config",
]
