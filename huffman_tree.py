# filename: huffman_tree.py

from typing import Iterator, List, NamedTuple, Optional, Tuple


class WeightedSymbol(NamedTuple):
    weight: int
    symbol: Optional[str] = None


class TreeNode(NamedTuple):
    """One slot of the arena.

    Leaves carry a symbol and no children. Internal nodes carry no symbol
    and the indices of exactly two children.
    """

    weight: int
    symbol: Optional[str] = None
    left: Optional[int] = None
    right: Optional[int] = None

    def is_leaf(self):
        return self.left is None and self.right is None


class NodeArena:
    """Append-only node storage used while a tree is being built.

    A child always exists before its parent, so every index a node refers to
    is smaller than its own and no cycle can be formed.
    """

    def __init__(self):
        self._nodes: List[TreeNode] = []
        self._owned = set()

    def __getitem__(self, index):
        return self._nodes[index]

    def add_leaf(self, item: WeightedSymbol) -> int:
        if item.symbol is None:
            raise ValueError("a leaf needs a symbol")
        if item.weight < 0:
            raise ValueError(f"negative weight for {item.symbol!r}: {item.weight}")
        self._nodes.append(TreeNode(item.weight, item.symbol))
        return len(self._nodes) - 1

    def add_internal(self, left: int, right: int) -> int:
        for child in (left, right):
            if child in self._owned:
                raise ValueError(f"node {child} already has a parent")
        if left == right:
            raise ValueError("an internal node needs two distinct children")
        weight = self._nodes[left].weight + self._nodes[right].weight
        self._nodes.append(TreeNode(weight, None, left, right))
        self._owned.update((left, right))
        return len(self._nodes) - 1

    def freeze(self, root: int) -> "HuffmanTree":
        return HuffmanTree(tuple(self._nodes), root)


class HuffmanTree:
    """Immutable binary tree addressed by node index."""

    def __init__(self, nodes: Tuple[TreeNode, ...], root: int):
        if not 0 <= root < len(nodes):
            raise IndexError(f"root index {root} out of range")
        self._nodes = nodes
        self._root = root

    @property
    def root(self) -> int:
        return self._root

    @property
    def weight(self) -> int:
        return self._nodes[self._root].weight

    def __len__(self):
        return len(self._nodes)

    def node(self, index) -> TreeNode:
        return self._nodes[index]

    def is_leaf(self, index) -> bool:
        return self._nodes[index].is_leaf()

    def left(self, index) -> Optional[int]:
        return self._nodes[index].left

    def right(self, index) -> Optional[int]:
        return self._nodes[index].right

    def is_single_leaf(self) -> bool:
        return self.is_leaf(self._root)

    def leaves(self) -> Iterator[Tuple[int, TreeNode]]:
        """Yield (index, node) for every leaf, left to right."""
        stack = [self._root]
        while stack:
            index = stack.pop()
            node = self._nodes[index]
            if node.is_leaf():
                yield index, node
            else:
                stack.append(node.right)
                stack.append(node.left)

    def depth(self, index) -> int:
        parents = {}
        for i, node in enumerate(self._nodes):
            if not node.is_leaf():
                parents[node.left] = i
                parents[node.right] = i
        depth = 0
        while index != self._root:
            index = parents[index]
            depth += 1
        return depth
