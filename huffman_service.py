# filename: huffman_service.py

import logging
from types import MappingProxyType

from huffman_config import CoderConfig
from huffman_core import HuffmanLogic
from huffman_errors import (
    DegenerateTreeTraversalError,
    InvalidCodeCharacterError,
    UnknownSymbolError,
)

logger = logging.getLogger(__name__)


class HuffmanCoder:
    """Huffman code built once from a source text.

    The tree and code table are fixed at construction and only read
    afterwards, so one coder can serve any number of encode/decode calls.

    Encoding drops characters that have no code (never seen in the source
    text, or outside the alphabet) unless ``config.strict_encode`` is set.
    """

    def __init__(self, message, config=None):
        self.config = config or CoderConfig()
        self.logic = HuffmanLogic()
        self._frequencies = tuple(
            self.logic.count_frequencies(message, self.config.alphabet)
        )
        self.tree = self.logic.build_tree(self._frequencies)
        self._codes = MappingProxyType(self.logic.generate_codes(self.tree))

    @property
    def frequencies(self):
        return self._frequencies

    @property
    def code_table(self):
        return self._codes

    def encode(self, message):
        codes = self._codes
        out = []
        dropped = 0
        for position, char in enumerate(message):
            code = codes.get(char)
            if code is None:
                if self.config.strict_encode:
                    raise UnknownSymbolError(char, position)
                dropped += 1
                continue
            out.append(code)
        if dropped:
            logger.debug("encode dropped %d characters without a code", dropped)
        return "".join(out)

    def decode(self, coded_message):
        if coded_message is None:
            return None
        tree = self.tree
        root = tree.root
        if coded_message and tree.is_single_leaf():
            raise DegenerateTreeTraversalError(tree.node(root).symbol)

        strict = self.config.strict_decode
        out = []
        current = root
        for position, bit in enumerate(coded_message):
            if bit == "1":
                current = tree.right(current)
            elif strict and bit != "0":
                raise InvalidCodeCharacterError(bit, position)
            else:
                current = tree.left(current)

            node = tree.node(current)
            if node.is_leaf():
                out.append(node.symbol)
                current = root
        if current != root and logger.isEnabledFor(logging.DEBUG):
            logger.debug("decode discarded %d trailing bits", tree.depth(current))
        return "".join(out)

    def weighted_path_length(self):
        """Total bits needed to encode the source text."""
        return sum(s.weight * len(self._codes[s.symbol]) for s in self._frequencies)

    def average_code_length(self):
        return self.weighted_path_length() / self.tree.weight


def construct(message, config=None):
    return HuffmanCoder(message, config)


def encode(coder, message):
    return coder.encode(message)


def decode(coder, coded_message):
    return coder.decode(coded_message)
