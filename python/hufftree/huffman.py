from typing import Any

from hufftree.abc import CodeBuilder, EncodingTableType, FrequencyTableType
from hufftree.forest import build_forest
from hufftree.frequency import alphabet_range, count, nonzero, total
from hufftree.reduce import reduce
from hufftree.table import build_table, encoded_bits, expected_code_length
from hufftree.tree import HuffTree


class Huffman(CodeBuilder):
    """Byte-level Huffman code builder.

    Chains the four stages: count -> build_forest -> reduce -> build_table.
    With `sparse=True` only bytes that occur in the input get a leaf; by
    default every byte of the alphabet does, so absent bytes still receive
    (long) codes.
    """

    def __init__(
        self,
        alphabet_size: int = 256,
        on_unsupported: str = "warn",
        single_symbol: str = "pad",
        sparse: bool = False,
        verbose: bool = False,
    ) -> None:
        self.alphabet = alphabet_range(alphabet_size)
        self.on_unsupported = on_unsupported
        self.single_symbol = single_symbol
        self.sparse = sparse
        self.verbose = verbose

    def frequencies(self, data: bytes) -> FrequencyTableType:
        return count(
            data,
            alphabet=self.alphabet,
            on_unsupported=self.on_unsupported,
            progress=self.verbose,
        )

    def _tree(self, F: FrequencyTableType) -> HuffTree:
        if self.sparse:
            F = nonzero(F)
        return reduce(build_forest(F))

    def make_tree(self, data: bytes) -> HuffTree:
        return self._tree(self.frequencies(data))

    def make_table(self, data: bytes) -> EncodingTableType:
        return build_table(self.make_tree(data), single_symbol=self.single_symbol)

    def build(self, data: bytes) -> dict[str, Any]:
        F = self.frequencies(data)
        tree = self._tree(F)
        table = build_table(tree, single_symbol=self.single_symbol)

        used = nonzero(F)
        meta: dict[str, Any] = {
            "alphabet": sorted(used),
            "F": [used[a] for a in sorted(used)],
            "M": total(F),
            "bits": encoded_bits(table, F),
            "avg_bits": expected_code_length(table, F),
            "max_len": max(len(c) for c in table.values()),
        }
        assert tree.weight == meta["M"], f"root weight {tree.weight} != M={meta['M']}"  # noqa

        if self.verbose:
            print("Alphabet:", meta["alphabet"])
            print("Total Frequency (M):", meta["M"])
            print("PMF:", meta["F"])
            print(f"Tree: {len(tree)} leaves, height {tree.height()}")
            print(f"Encoded length: {meta['bits']} bits, {meta['avg_bits']:.3f} bits/symbol")  # noqa

        return {"table": table, "tree": tree, "meta": meta}
