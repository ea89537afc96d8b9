"""
Transactions and Safety Tutorial

Goals:
- Try several mutations on a gene inside a GeneTransaction
- Commit to keep them, or rollback to restore markers and RNG state

Design tips:
- Keep transactions short; one trial edit sequence per transaction
- Rollback restores the RNG too, so a retried trial draws the same edits
"""

from genemark.core.gene import Gene
from genemark.evolution.transaction import GeneTransaction
from genemark.utils.rng_manager import RNGManager


def score(gene: Gene) -> float:
    # Toy objective: prefer genes whose visible markers sum close to zero
    return -abs(sum(float(v) for v in gene.get_markers()))


def main():
    rng = RNGManager(seed=7)
    gene = Gene.create(4, rng)
    tx = GeneTransaction(gene, rng)

    for trial in range(5):
        baseline = score(gene)
        tx.begin()
        for _ in range(3):
            tx.mutate()
        if score(gene) >= baseline:
            records = tx.commit()
            print(f'trial {trial}: kept', [r.kind.name for r in records])
        else:
            tx.rollback()
            print(f'trial {trial}: rolled back')

    print('final_score:', score(gene))


if __name__ == '__main__':
    main()
