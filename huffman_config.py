# filename: huffman_config.py

import string
from dataclasses import dataclass

# Declaration order matters: frequency output follows it.
DEFAULT_ALPHABET = (
    string.ascii_lowercase
    + string.ascii_uppercase
    + string.digits
    + " \t\n"
    + "!.?"
)


@dataclass(frozen=True)
class CoderConfig:
    """Settings shared by the counter, the builder and the coder.

    alphabet       accepted characters, in declaration order
    strict_encode  raise on characters missing from the code table
                   instead of dropping them
    strict_decode  raise on anything other than '0'/'1' instead of
                   reading it as '0'
    """

    alphabet: str = DEFAULT_ALPHABET
    strict_encode: bool = False
    strict_decode: bool = False

    def __post_init__(self):
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            dupes = sorted({ch for ch in self.alphabet if self.alphabet.count(ch) > 1})
            raise ValueError(f"alphabet has duplicated characters: {dupes!r}")
