"""Gene reports and determinism signatures.

Reports are plain JSON-serializable dicts so they can be logged or stored
alongside a run. Two runs driven by the same seed produce identical reports
and therefore identical signatures.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Iterable, Optional

from genemark.core.gene import Gene
from genemark.utils.rng_manager import RNGManager

REPORT_SCHEMA_VERSION = 1


def _sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def gene_report(gene: Gene, rng_manager: Optional[RNGManager] = None) -> dict[str, Any]:
    encoded = gene.encode()
    report: dict[str, Any] = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "num_markers": int(gene.num_markers),
        "stored_markers": len(gene.markers),
        "influence_hex": gene.markers[0].encode() if gene.markers else None,
        "encoded": encoded,
        "marker_checksum": _sha256(encoded),
    }
    if rng_manager is not None:
        report["env"] = {"seed": rng_manager.seed}
    return report


def determinism_signature(report: dict[str, Any]) -> str:
    """SHA-256 over the canonical JSON form of ``report``."""
    return _sha256(json.dumps(report, sort_keys=True, separators=(",", ":")))


def assert_determinism_equivalence(reports: Iterable[dict[str, Any]]) -> None:
    signatures = [determinism_signature(r) for r in reports]
    if len(set(signatures)) > 1:
        raise AssertionError(f"Determinism signatures differ: {signatures}")


__all__ = [
    "REPORT_SCHEMA_VERSION",
    "gene_report",
    "determinism_signature",
    "assert_determinism_equivalence",
]
