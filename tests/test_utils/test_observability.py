import json

import pytest

from genemark.core.gene import Gene
from genemark.evolution.mutation import MutationType, fixed_selection
from genemark.utils.observability import (
    REPORT_SCHEMA_VERSION,
    assert_determinism_equivalence,
    determinism_signature,
    gene_report,
)
from genemark.utils.rng_manager import RNGManager


def _seeded_report(seed: int, mutations: int = 3) -> dict:
    rng = RNGManager(seed=seed)
    gene = Gene.create(3, rng)
    for _ in range(mutations):
        gene.mutate(rng)
    return gene_report(gene, rng_manager=rng)


def test_report_fields():
    rng = RNGManager(seed=1)
    gene = Gene.create(2, rng)
    rep = gene_report(gene, rng_manager=rng)
    assert rep["schema_version"] == REPORT_SCHEMA_VERSION
    assert rep["num_markers"] == 2
    assert rep["stored_markers"] == 3
    assert rep["encoded"] == gene.encode()
    assert rep["influence_hex"] == gene.encode()[:8]
    assert rep["env"] == {"seed": 1}
    json.dumps(rep)  # must be serializable


def test_report_without_manager_has_no_env():
    gene = Gene.decode("3f800000" * 3)
    assert "env" not in gene_report(gene)


def test_signature_is_stable_across_identical_runs():
    rep1 = _seeded_report(seed=9)
    rep2 = _seeded_report(seed=9)
    assert determinism_signature(rep1) == determinism_signature(rep2)
    assert_determinism_equivalence([rep1, rep2])


def test_signature_drifts_after_mutation():
    rng = RNGManager(seed=2)
    gene = Gene.create(2, rng)
    before = gene_report(gene)
    gene.mutate(rng, fixed_selection(MutationType.NEW))
    after = gene_report(gene)
    assert before["marker_checksum"] != after["marker_checksum"]
    with pytest.raises(AssertionError):
        assert_determinism_equivalence([before, after])
