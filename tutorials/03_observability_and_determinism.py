"""
Observability & Determinism Tutorial

Goals:
- Build a gene report after a seeded mutation run
- Compute determinism signature and show stability
"""

from genemark.core.gene import Gene
from genemark.utils.observability import (
    assert_determinism_equivalence,
    determinism_signature,
    gene_report,
)
from genemark.utils.rng_manager import RNGManager


def run(seed: int) -> dict:
    rng = RNGManager(seed=seed)
    gene = Gene.create(8, rng)
    for _ in range(20):
        gene.mutate(rng)
    return gene_report(gene, rng_manager=rng)


def main():
    rep1 = run(seed=3)
    rep2 = run(seed=3)
    assert_determinism_equivalence([rep1, rep2])
    print('schema_version:', rep1.get('schema_version'))
    print('determinism_sig:', determinism_signature(rep1))


if __name__ == '__main__':
    main()
