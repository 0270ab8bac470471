class HuffTreeError(Exception):
    """Base class for errors raised while building a Huffman code."""


class EmptyInputError(HuffTreeError, ValueError):
    """Reduction was asked to build a tree from an empty forest."""


class UnsupportedByteValue(HuffTreeError, ValueError):
    """A byte outside the configured alphabet was found in the input."""

    def __init__(self, byte: int, position: int) -> None:
        super().__init__(
            f"byte {byte} at position {position} is outside the alphabet"
        )
        self.byte = byte
        self.position = position


class DegenerateSingleSymbolTree(HuffTreeError, ValueError):
    """The tree is a single leaf, so its only code would be empty."""

    def __init__(self, byte: int) -> None:
        super().__init__(
            f"tree has a single leaf (byte {byte}); its code would be empty"
        )
        self.byte = byte


class UnsupportedByteWarning(UserWarning):
    pass
