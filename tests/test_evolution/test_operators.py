import logging

import pytest

from genemark.core.gene import Gene
from genemark.evolution.mutation import MUTATION_TYPES, MutationType, fixed_selection
from genemark.evolution.operators import MutationRecord, mutate
from genemark.utils.rng_manager import RNGManager


def _texts(gene: Gene) -> list[str]:
    return [m.encode() for m in gene.markers]


def _mutate_forced(kind: MutationType, seed: int, num_markers: int = 4):
    rng = RNGManager(seed=seed)
    gene = Gene.create(num_markers, rng)
    before = _texts(gene)
    record = mutate(gene, rng, fixed_selection(kind))
    return before, _texts(gene), record


def _changed(before: list[str], after: list[str]) -> set[int]:
    return {i for i, (b, a) in enumerate(zip(before, after)) if b != a}


@pytest.mark.parametrize("seed", range(20))
def test_delete_zeroes_a_single_marker(seed):
    before, after, record = _mutate_forced(MutationType.DELETE, seed)
    assert record.kind is MutationType.DELETE
    assert after[record.target] == "00000000"
    assert _changed(before, after) <= {record.target}


@pytest.mark.parametrize("seed", range(20))
def test_duplication_copies_value_into_non_influence_slot(seed):
    before, after, record = _mutate_forced(MutationType.DUPLICATION, seed)
    assert 1 <= record.secondary < len(before)
    assert after[record.secondary] == before[record.target]
    assert _changed(before, after) <= {record.secondary}


@pytest.mark.parametrize("seed", range(20))
def test_new_replaces_only_target(seed):
    before, after, record = _mutate_forced(MutationType.NEW, seed)
    assert record.secondary is None
    assert _changed(before, after) == {record.target}


@pytest.mark.parametrize("seed", range(20))
def test_reversal_swaps_two_markers(seed):
    before, after, record = _mutate_forced(MutationType.REVERSAL, seed)
    target, swap = record.target, record.secondary
    assert 1 <= swap < len(before)
    assert after[target] == before[swap]
    assert after[swap] == before[target]
    assert _changed(before, after) <= {target, swap}


@pytest.mark.parametrize("seed", range(20))
def test_shift_permutes_whole_sequence(seed):
    before, after, record = _mutate_forced(MutationType.SHIFT, seed)
    assert sorted(record.permutation) == list(range(len(before)))
    assert after == [before[i] for i in record.permutation]
    assert sorted(after) == sorted(before)


def test_shift_can_move_influence_marker():
    moved = False
    for seed in range(50):
        before, after, _ = _mutate_forced(MutationType.SHIFT, seed)
        if after[0] != before[0]:
            moved = True
            break
    assert moved


def test_first_index_can_hit_influence_slot():
    targets = {_mutate_forced(MutationType.DELETE, seed)[2].target for seed in range(100)}
    assert 0 in targets


def test_mutation_never_changes_length():
    rng = RNGManager(seed=99)
    gene = Gene.create(3, rng)
    kinds = set()
    for _ in range(300):
        record = mutate(gene, rng)
        kinds.add(record.kind)
        assert len(gene.markers) == 4
        assert gene.num_markers == 3
    assert kinds == set(MUTATION_TYPES)


def test_mutation_is_reproducible_from_seed():
    def run(seed):
        rng = RNGManager(seed=seed)
        gene = Gene.create(5, rng)
        records = [gene.mutate(rng) for _ in range(25)]
        return gene.encode(), records

    assert run(8) == run(8)


def test_gene_mutate_delegates_with_strategy():
    rng = RNGManager(seed=12)
    gene = Gene.create(2, rng)
    record = gene.mutate(rng, fixed_selection(MutationType.DELETE))
    assert isinstance(record, MutationRecord)
    assert gene.markers[record.target].encode() == "00000000"


@pytest.mark.parametrize("kind", [MutationType.DUPLICATION, MutationType.REVERSAL])
def test_single_marker_gene_has_no_second_slot(kind):
    gene = Gene.decode("3f800000")
    record = mutate(gene, RNGManager(seed=0), fixed_selection(kind))
    assert record.target == 0
    assert record.secondary is None
    assert record.is_noop
    assert gene.encode() == "3f800000"


def test_noop_detection():
    assert MutationRecord(MutationType.REVERSAL, 2, secondary=2).is_noop
    assert not MutationRecord(MutationType.REVERSAL, 0, secondary=2).is_noop
    assert MutationRecord(MutationType.SHIFT, 0, permutation=(0, 1, 2)).is_noop
    assert not MutationRecord(MutationType.SHIFT, 0, permutation=(1, 0, 2)).is_noop
    assert not MutationRecord(MutationType.DELETE, 1).is_noop


def test_mutation_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG)
    rng = RNGManager(seed=3)
    gene = Gene.create(2, rng)
    mutate(gene, rng, fixed_selection(MutationType.NEW))
    assert "Applied NEW mutation" in caplog.text
