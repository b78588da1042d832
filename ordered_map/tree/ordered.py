from __future__ import annotations

from typing import List, Optional, Tuple, TypeVar, Union

from .base import Tree, TreeNode, _size

K = TypeVar("K")
V = TypeVar("V")


class OrderedTree(Tree):
    """Binary search tree map with order-statistic queries.

    Every node caches the size of its subtree, which lets `rank` and `select`
    run in O(height) without any auxiliary index. The tree is never
    rebalanced.
    """

    def __init__(self):
        super().__init__(OrderedNode)

    def height(self) -> int:
        """Number of links on the longest root-to-leaf path, -1 if empty.

        Heights are not cached, so this visits every node.
        """
        if self._root is None:
            return -1
        return self._root._height()

    def rank(self, key: K) -> int:
        """Number of keys in the tree smaller than `key`.

        Only meaningful for keys present in the tree. Falling off the tree
        contributes -1 to the result, so an absent key yields a position that
        is off by one (or -1 below the minimum).
        """
        if self._root is None:
            return -1
        return self._root._rank(key)

    def select(self, rank: int) -> Optional[K]:
        """Key with the given zero-based rank, or None if out of range."""
        if rank < 0 or rank >= self.size():
            return None
        return self._root._select(rank).key

    def median(self) -> Optional[K]:
        """Key at sorted position (N+1)/2, counting from one and rounding down."""
        if self._root is None:
            return None
        largest = self._root._max_node()
        max_rank = self.rank(largest.key)
        return self.select((max_rank + 1) // 2)

    def print_keys_in_order(self) -> str:
        """Fully parenthesized in-order listing of the keys.

        Each subtree appears as `(left key right)`, with empty subtrees shown
        as `()`.
        """
        if self._root is None:
            return "()"
        out: List[str] = []
        self._root._write_in_order(out)
        return "".join(out)

    def pretty_print_keys(self) -> str:
        """Multi-line drawing of the tree, one node per line.

        Every node is followed by its left subtree (under a `|` guide) and
        then its right subtree. Missing children are drawn as `-null`.
        """
        out: List[str] = []
        OrderedNode._write_pretty(self._root, "", out)
        return "".join(out)


class OrderedNode(TreeNode):
    def _height(self) -> int:
        height = 0
        pending: List[Tuple[OrderedNode[K, V], int]] = [(self, 0)]
        while len(pending) > 0:
            node, depth = pending.pop()
            height = max(height, depth)
            if node._left is not None:
                pending.append((node._left, depth + 1))
            if node._right is not None:
                pending.append((node._right, depth + 1))
        return height

    def _rank(self, key: K) -> int:
        rank = 0
        x = self
        while x is not None:
            if key < x.key:
                x = x._left
            elif x.key < key:
                rank += 1 + _size(x._left)
                x = x._right
            else:
                return rank + _size(x._left)
        # fell off the tree
        return rank - 1

    def _select(self, rank: int) -> OrderedNode[K, V]:
        x = self
        while True:
            left_count = _size(x._left)
            if left_count > rank:
                x = x._left
            elif left_count < rank:
                rank -= left_count + 1
                x = x._right
            else:
                return x

    def _write_in_order(self, out: List[str]):
        pending: List[Union[str, OrderedNode[K, V]]] = [self]
        while len(pending) > 0:
            item = pending.pop()
            if isinstance(item, str):
                out.append(item)
                continue

            pending.append(")")
            pending.append(item._right if item._right is not None else "()")
            pending.append(str(item.key))
            pending.append(item._left if item._left is not None else "()")
            out.append("(")

    @staticmethod
    def _write_pretty(node: Optional[OrderedNode], prefix: str, out: List[str]):
        pending: List[Tuple[Optional[OrderedNode], str]] = [(node, prefix)]
        while len(pending) > 0:
            node, prefix = pending.pop()
            if node is None:
                out.append(prefix + "-null\n")
                continue

            out.append(prefix + "-" + str(node.key) + "\n")
            pending.append((node._right, prefix + "  "))
            pending.append((node._left, prefix + " |"))
