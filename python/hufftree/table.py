from hufftree.abc import EncodingTableType, FrequencyTableType
from hufftree.errors import DegenerateSingleSymbolTree
from hufftree.tree import HuffTree, Internal, Leaf

SINGLE_SYMBOL_POLICIES = ("pad", "error", "empty")


def build_table(tree: HuffTree, single_symbol: str = "pad") -> EncodingTableType:
    """Map every leaf byte of `tree` to its root-to-leaf path.

    Going left appends '0', going right appends '1'. A tree that is a single
    leaf has an empty path; `single_symbol` decides what happens then:
    "pad" gives the byte the one-bit code "0", "error" raises
    DegenerateSingleSymbolTree and "empty" keeps the empty code.
    """
    if single_symbol not in SINGLE_SYMBOL_POLICIES:
        raise ValueError(
            f"Unknown policy: {single_symbol!r}, expected one of {SINGLE_SYMBOL_POLICIES}"  # noqa
        )

    if isinstance(tree.node, Leaf):
        if single_symbol == "error":
            raise DegenerateSingleSymbolTree(tree.node.byte)
        return {tree.node.byte: "0" if single_symbol == "pad" else ""}

    table: EncodingTableType = {}
    stack: list[tuple[HuffTree, str]] = [(tree, "")]
    while stack:
        t, prefix = stack.pop()
        node = t.node
        if isinstance(node, Internal):
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
        else:
            assert node.byte not in table, f"byte {node.byte} appears twice in the tree"  # noqa
            table[node.byte] = prefix
    return table


def is_prefix_code(table: EncodingTableType) -> bool:
    codes = sorted(table.values())
    if any(c.strip("01") != "" for c in codes):
        return False
    # Once sorted, a code that prefixes any other code also prefixes its successor.
    for c1, c2 in zip(codes, codes[1:]):
        if c2.startswith(c1):
            return False
    return True


def code_lengths(table: EncodingTableType) -> dict[int, int]:
    return {a: len(c) for a, c in table.items()}


def encoded_bits(table: EncodingTableType, F: FrequencyTableType) -> int:
    return sum(f * len(table[a]) for a, f in F.items() if f > 0)


def expected_code_length(table: EncodingTableType, F: FrequencyTableType) -> float:
    M = sum(F.values())
    if M == 0:
        return 0.0
    return encoded_bits(table, F) / M
