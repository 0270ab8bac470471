from abc import ABC, abstractmethod
from typing import TypeAlias


# byte value -> number of occurrences
FrequencyTableType: TypeAlias = dict[int, int]
# byte value -> code over {'0', '1'}
EncodingTableType: TypeAlias = dict[int, str]
AlphabetType: TypeAlias = range | list[int]

ALPHABET_SIZE = 256
ALPHABET: AlphabetType = range(ALPHABET_SIZE)


class CodeBuilder(ABC):
    @abstractmethod
    def build(self, data: bytes) -> dict:
        pass
