from hufftree.abc import ALPHABET_SIZE, FrequencyTableType
from hufftree.tree import HuffTree


def build_forest(F: FrequencyTableType) -> list[HuffTree]:
    # One leaf per entry, zero weights included, in ascending byte order.
    forest: list[HuffTree] = []
    for a in sorted(F):
        f = F[a]
        if not 0 <= a < ALPHABET_SIZE:
            raise ValueError(f"Invalid byte value: {a}")
        if f < 0:
            raise ValueError(f"Negative frequency for byte {a}: {f}")
        forest.append(HuffTree.leaf(a, f))
    return forest
