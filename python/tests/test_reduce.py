import heapq
import random

import pytest  # noqa

from hufftree.errors import EmptyInputError
from hufftree.forest import build_forest
from hufftree.frequency import count
from hufftree.reduce import reduce
from hufftree.table import build_table, encoded_bits
from hufftree.tree import HuffTree, Internal


def huffman_cost(weights: list[int]) -> int:
    # Sum of all merge weights == weighted path length of a Huffman tree.
    q = list(weights)
    heapq.heapify(q)
    cost = 0
    while len(q) > 1:
        w = heapq.heappop(q) + heapq.heappop(q)
        cost += w
        heapq.heappush(q, w)
    return cost


def test_empty_forest():
    with pytest.raises(EmptyInputError):
        reduce([])


def test_empty_forest_is_value_error():
    with pytest.raises(ValueError):
        reduce([])


def test_single_tree():
    t = HuffTree.leaf(65, 10)
    assert reduce([t]) is t


def test_two_trees_extraction_order():
    a = HuffTree.leaf(1, 5)
    b = HuffTree.leaf(2, 3)
    root = reduce([a, b])
    assert root.weight == 8
    assert isinstance(root.node, Internal)
    assert root.node.left is b
    assert root.node.right is a


def test_tie_first_inserted_wins():
    x = HuffTree.leaf(10, 4)
    y = HuffTree.leaf(20, 4)
    root = reduce([x, y])
    assert root.node.left is x
    assert root.node.right is y


def test_merged_tree_after_equal_leaf():
    # c+b (weight 3) ties with a (weight 3); a was inserted first.
    forest = build_forest({ord("a"): 3, ord("b"): 2, ord("c"): 1})
    root = reduce(forest)
    assert root.node.left.is_leaf
    assert root.node.left.node.byte == ord("a")


@pytest.mark.parametrize("seed", range(10))
def test_optimal_cost(seed):
    rng = random.Random(seed)
    data = bytes(rng.choice(b"abcdefgh") for _ in range(rng.randint(1, 500)))
    F = count(data)
    table = build_table(reduce(build_forest(F)))
    assert encoded_bits(table, F) == huffman_cost(list(F.values()))


@pytest.mark.parametrize("data", [b"", b"a", b"aaabbc", bytes(range(256)) * 2])
def test_root_weight(data):
    root = reduce(build_forest(count(data)))
    assert root.weight == len(data)
    assert len(root) == 256
    assert sorted(b for b, _ in root.leaves()) == list(range(256))


def test_does_not_mutate_forest():
    forest = build_forest(count(b"abc"))
    before = list(forest)
    reduce(forest)
    assert forest == before
