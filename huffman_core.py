# filename: huffman_core.py

import heapq
import logging
from collections import Counter

from huffman_config import DEFAULT_ALPHABET
from huffman_errors import EmptyAlphabetError
from huffman_tree import NodeArena, WeightedSymbol

logger = logging.getLogger(__name__)


class HuffmanLogic:
    def count_frequencies(self, text, alphabet=DEFAULT_ALPHABET):
        """Count accepted characters of ``text``.

        Returns one WeightedSymbol per alphabet character that occurs at
        least once, in the alphabet's declaration order. Anything outside
        the alphabet is dropped.
        """
        # Frequency analysis of the input text
        counts = Counter(text)
        symbols = [WeightedSymbol(counts[ch], ch) for ch in alphabet if counts[ch] > 0]
        accepted = sum(s.weight for s in symbols)
        logger.debug(
            "counted %d distinct symbols over %d accepted characters (%d dropped)",
            len(symbols), accepted, len(text) - accepted,
        )
        return symbols

    def build_tree(self, symbols):
        arena = NodeArena()
        # Build a priority queue for leaf nodes. Arena indices grow with
        # insertion, so they break weight ties in insertion order.
        priority_queue = []
        for item in symbols:
            if item.weight == 0:
                continue
            index = arena.add_leaf(item)
            priority_queue.append((item.weight, index))
        if not priority_queue:
            raise EmptyAlphabetError()
        heapq.heapify(priority_queue)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            _, left = heapq.heappop(priority_queue)
            _, right = heapq.heappop(priority_queue)
            merged = arena.add_internal(left, right)
            heapq.heappush(priority_queue, (arena[merged].weight, merged))

        _, root = priority_queue[0]
        tree = arena.freeze(root)
        logger.debug("built tree: %d nodes, root weight %d", len(tree), tree.weight)
        return tree

    def generate_codes(self, tree):
        codes = {}

        def walk(index, current_code):
            node = tree.node(index)
            if node.is_leaf():
                codes[node.symbol] = current_code
                return
            walk(node.left, current_code + "0")
            walk(node.right, current_code + "1")

        walk(tree.root, "")
        return codes
