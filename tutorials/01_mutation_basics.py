"""
Mutation Basics Tutorial

Goals:
- Apply random mutations to a gene deterministically
- Force a specific mutation kind with a fixed selection strategy
- Bias mutation kinds with weighted (roulette) selection
"""

from genemark.core.gene import Gene
from genemark.evolution.mutation import MutationType, fixed_selection, weighted_selection
from genemark.evolution.operators import mutate
from genemark.utils.rng_manager import RNGManager


def main():
    rng = RNGManager(seed=42)
    gene = Gene.create(4, rng)
    print('start:', gene.encode())

    # Uniform choice among DELETE, DUPLICATION, NEW, REVERSAL, SHIFT
    for _ in range(5):
        record = gene.mutate(rng)
        print(f'{record.kind.name:<12} target={record.target} secondary={record.secondary} noop={record.is_noop}')

    # Always SHIFT: permutes every marker, influence included
    record = mutate(gene, rng, fixed_selection(MutationType.SHIFT))
    print('shift_permutation:', record.permutation)

    # Mostly DELETE, occasionally NEW
    biased = weighted_selection({'delete': 0.9, 'new': 0.1})
    kinds = [mutate(gene, rng, biased).kind.name for _ in range(10)]
    print('biased_kinds:', kinds)
    print('end:', gene.encode())


if __name__ == '__main__':
    main()
