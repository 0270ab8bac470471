import warnings

import tqdm  # noqa

from hufftree.abc import ALPHABET, ALPHABET_SIZE, AlphabetType, FrequencyTableType
from hufftree.errors import UnsupportedByteValue, UnsupportedByteWarning

POLICIES = ("error", "warn", "ignore")


def alphabet_range(size: int) -> range:
    if not 1 <= size <= ALPHABET_SIZE:
        raise ValueError(f"alphabet size must be in [1, {ALPHABET_SIZE}], got {size}")  # noqa
    return range(size)


def count(
    data: bytes,
    alphabet: AlphabetType = ALPHABET,
    on_unsupported: str = "warn",
    progress: bool = False,
) -> FrequencyTableType:
    """Count every byte of `data` that belongs to `alphabet`.

    Every value of the alphabet gets an entry, zero included. Bytes outside
    the alphabet are handled according to `on_unsupported`:
    "error" raises UnsupportedByteValue, "warn" drops them and emits a single
    UnsupportedByteWarning, "ignore" drops them silently.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a byte sequence, got {type(data).__name__}")
    if on_unsupported not in POLICIES:
        raise ValueError(f"Unknown policy: {on_unsupported!r}, expected one of {POLICIES}")  # noqa

    F: FrequencyTableType = {a: 0 for a in alphabet}
    dropped: dict[int, int] = {}

    for pos, s in enumerate(tqdm.tqdm(bytes(data), desc="Counting", disable=not progress)):  # noqa
        if s in F:
            F[s] += 1
        elif on_unsupported == "error":
            raise UnsupportedByteValue(s, pos)
        else:
            dropped[s] = dropped.get(s, 0) + 1

    if dropped and on_unsupported == "warn":
        n = sum(dropped.values())
        warnings.warn(
            f"dropped {n} byte(s) outside the alphabet: {sorted(dropped)}",
            UnsupportedByteWarning,
            stacklevel=2,
        )

    return F


def total(F: FrequencyTableType) -> int:
    return sum(F.values())


def nonzero(F: FrequencyTableType) -> FrequencyTableType:
    return {a: f for a, f in F.items() if f > 0}
