from genemark.core.gene import Gene
from genemark.core.marker import Marker
from genemark.utils.rng_manager import RNGManager


def main():
    # Quickstart goal:
    # 1) Encode a single marker to its 8-character hex text and back
    # 2) Build a gene from a seeded random source
    # 3) Round-trip the gene through its text form

    # Markers hold one float32; the text is its big-endian bytes in hex.
    marker = Marker.from_value(1.0)
    print('marker_text:', marker.encode())  # 3f800000
    print('marker_back:', Marker.decode(marker.encode()).value)

    # All randomness comes from an explicit, seedable manager.
    rng = RNGManager(seed=42)

    # A gene with 3 markers stores 4: the first one is the influence marker.
    gene = Gene.create(3, rng)
    print('influence:', gene.get_influence())
    print('markers:', gene.get_markers())
    print('marker_0:', gene.get_marker(0))
    print('marker_9:', gene.get_marker(9))  # out of range -> None

    # Gene text is the concatenation of its marker texts, influence first.
    text = gene.encode()
    restored = Gene.decode(text)
    print('text:', text)
    print('equal_after_decode:', Gene.is_equal(Gene.decode(text), restored))
    # Decoding counts the influence chunk too, so num_markers grows by one.
    print('num_markers:', gene.num_markers, '->', restored.num_markers)


if __name__ == '__main__':
    main()
