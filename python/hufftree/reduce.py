import heapq
import itertools

from hufftree.errors import EmptyInputError
from hufftree.tree import HuffTree


def reduce(forest: list[HuffTree]) -> HuffTree:
    """Merge a forest into a single Huffman tree.

    The two lightest trees are popped and merged (first popped becomes the
    left child) until one tree remains. Heap entries carry an insertion
    sequence number, so among trees of equal weight the one inserted first
    is popped first and the resulting shape is reproducible.
    """
    if len(forest) == 0:
        raise EmptyInputError("cannot build a Huffman tree from an empty forest")

    seq = itertools.count()
    queue: list[tuple[int, int, HuffTree]] = [(t.weight, next(seq), t) for t in forest]  # noqa
    heapq.heapify(queue)

    while len(queue) > 1:
        _, _, a = heapq.heappop(queue)
        _, _, b = heapq.heappop(queue)
        t = HuffTree.merge(a, b)
        heapq.heappush(queue, (t.weight, next(seq), t))

    _, _, root = queue[0]
    assert root.weight == sum(t.weight for t in forest), f"weight mismatch: {root.weight}"  # noqa
    return root
