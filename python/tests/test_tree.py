from hufftree.tree import HuffTree, Internal, Leaf


def test_leaf():
    t = HuffTree.leaf(65, 3)
    assert t.is_leaf
    assert t.node == Leaf(65)
    assert t.weight == 3
    assert t.height() == 0
    assert len(t) == 1
    assert list(t.leaves()) == [(65, 3)]


def test_merge():
    a = HuffTree.leaf(1, 2)
    b = HuffTree.leaf(2, 5)
    t = HuffTree.merge(a, b)
    assert not t.is_leaf
    assert t.weight == 7
    assert t.node == Internal(a, b)
    assert list(t.leaves()) == [(1, 2), (2, 5)]
    assert t.height() == 1


def test_leaves_left_to_right():
    t = HuffTree.merge(
        HuffTree.merge(HuffTree.leaf(1, 1), HuffTree.leaf(2, 1)),
        HuffTree.merge(HuffTree.leaf(3, 1), HuffTree.merge(HuffTree.leaf(4, 1), HuffTree.leaf(5, 1))),  # noqa
    )
    assert [b for b, _ in t.leaves()] == [1, 2, 3, 4, 5]
    assert t.height() == 3
    assert len(t) == 5
    assert t.weight == 5


def test_repr():
    assert repr(HuffTree.leaf(9, 1)) == "HuffTree(weight=1, byte=9)"
    t = HuffTree.merge(HuffTree.leaf(1, 1), HuffTree.leaf(2, 1))
    assert repr(t) == "HuffTree(weight=2, leaves=2)"
