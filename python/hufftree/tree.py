from typing import Iterator, NamedTuple, Union


class Leaf(NamedTuple):
    byte: int


class Internal(NamedTuple):
    left: "HuffTree"
    right: "HuffTree"


HuffNode = Union[Leaf, Internal]


class HuffTree(object):
    """A weighted Huffman (sub)tree.

    The weight of a leaf is the frequency of its byte; the weight of an
    internal node is the sum of the weights of its two children. Each
    internal node owns its children; subtrees are never shared.
    """

    __slots__ = ("weight", "node")

    def __init__(self, weight: int, node: HuffNode) -> None:
        self.weight = weight
        self.node = node

    @classmethod
    def leaf(cls, byte: int, weight: int) -> "HuffTree":
        return cls(weight, Leaf(byte))

    @classmethod
    def merge(cls, left: "HuffTree", right: "HuffTree") -> "HuffTree":
        return cls(left.weight + right.weight, Internal(left, right))

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.node, Leaf)

    def leaves(self) -> Iterator[tuple[int, int]]:
        """Yield ``(byte, weight)`` for every leaf, left to right."""
        stack: list[HuffTree] = [self]
        while stack:
            t = stack.pop()
            if isinstance(t.node, Leaf):
                yield t.node.byte, t.weight
            else:
                stack.append(t.node.right)
                stack.append(t.node.left)

    def height(self) -> int:
        h = 0
        stack: list[tuple[HuffTree, int]] = [(self, 0)]
        while stack:
            t, depth = stack.pop()
            if isinstance(t.node, Internal):
                stack.append((t.node.left, depth + 1))
                stack.append((t.node.right, depth + 1))
            else:
                h = max(h, depth)
        return h

    def __len__(self) -> int:
        return sum(1 for _ in self.leaves())

    def __repr__(self) -> str:
        if isinstance(self.node, Leaf):
            return f"HuffTree(weight={self.weight}, byte={self.node.byte})"
        return f"HuffTree(weight={self.weight}, leaves={len(self)})"
