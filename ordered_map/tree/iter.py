from __future__ import annotations

from typing import List, Optional

from . import base


class TreeIter(object):
    """In-order walk over a subtree using an explicit stack.

    Keys are restricted to `lower <= key < upper` when bounds are given.
    """

    KEYS = 0
    VALS = 1
    ITEMS = 2
    NODES = 3

    def __init__(
        self,
        mode: int,
        root: Optional[base.TreeNode],
        lower=None,
        upper=None,
        rev: bool = False,
    ):
        self._rev: bool = rev
        self._mode: int = mode
        self._lower = lower
        self._upper = upper
        self._stack: List[base.TreeNode] = []

        node = root
        while node is not None:
            if not rev:
                if lower is not None and node.key < lower:
                    node = node._right
                else:
                    self._stack.append(node)
                    node = node._left
            else:
                if upper is not None and not (node.key < upper):
                    node = node._left
                else:
                    self._stack.append(node)
                    node = node._right

    def __iter__(self) -> TreeIter:
        return self

    def _push_spine(self, node: Optional[base.TreeNode]):
        while node is not None:
            self._stack.append(node)
            node = node._right if self._rev else node._left

    def _in_range(self, node: base.TreeNode) -> bool:
        if self._rev:
            return self._lower is None or not (node.key < self._lower)
        return self._upper is None or node.key < self._upper

    def __next__(self):
        if len(self._stack) == 0:
            raise StopIteration()

        cur_node = self._stack.pop()
        if not self._in_range(cur_node):
            # everything left on the stack lies further out of range
            self._stack.clear()
            raise StopIteration()

        if not self._rev:
            self._push_spine(cur_node._right)
        else:
            self._push_spine(cur_node._left)

        if self._mode == TreeIter.KEYS:
            return cur_node.key
        elif self._mode == TreeIter.VALS:
            return cur_node.value
        elif self._mode == TreeIter.ITEMS:
            return (cur_node.key, cur_node.value)
        elif self._mode == TreeIter.NODES:
            return cur_node
