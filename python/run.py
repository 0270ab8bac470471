import fire  # noqa

from hufftree.huffman import Huffman
from hufftree.table import is_prefix_code


def ch(x: int) -> str:
    if 32 <= x < 127:
        return chr(x)
    elif x == ord("\n"):
        return "\\n"
    return "<?>"


def main(
    in_file: str,
    alphabet_size: int = 256,
    on_unsupported: str = "warn",
    single_symbol: str = "pad",
    sparse: bool = False,
    quiet: bool = False,
):
    with open(in_file, "rb") as f:
        data = f.read()

    huff = Huffman(
        alphabet_size=alphabet_size,
        on_unsupported=on_unsupported,
        single_symbol=single_symbol,
        sparse=sparse,
        verbose=not quiet,
    )
    result = huff.build(data)
    table = result["table"]
    meta = result["meta"]

    if not is_prefix_code(table):
        raise RuntimeError(f"Encoding table is not a prefix code: {table!r}")

    print("\nEncoding table:")
    print("Alphabet size:", len(meta["alphabet"]))
    print("Data length: ", len(data), "symbols")
    print(f"Encoded length: {meta['bits']} bits = {meta['bits'] / 8:.2f} bytes")  # noqa
    if meta["bits"] > 0:
        orig_bits = len(data) * 8
        print(f"Compression rate: {orig_bits / meta['bits']:.2f}x")

    for a, f in zip(meta["alphabet"], meta["F"]):
        print(f"{a:3d} {ch(a):>4} {f:8d}  {table[a]}")


if __name__ == "__main__":
    fire.Fire(main)
