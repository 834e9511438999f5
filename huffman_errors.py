# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every error raised by the coder."""


class EmptyAlphabetError(HuffmanError, ValueError):
    def __init__(self, message="source text contains no accepted characters"):
        super().__init__(message)


class DegenerateTreeTraversalError(HuffmanError):
    """Raised when decoding against a tree that is a single leaf.

    A tree built from exactly one distinct symbol has no internal node, so
    there is no child to descend into for any bit.
    """

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(
            f"cannot traverse a single-leaf tree (only symbol: {symbol!r})"
        )


class InvalidCodeCharacterError(HuffmanError, ValueError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"invalid code character {char!r} at position {position}")


class UnknownSymbolError(HuffmanError, KeyError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"no code for character {char!r} at position {position}")

    def __str__(self):
        # KeyError would repr() the message otherwise
        return self.args[0]
