from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Generic, TypeVar, List, Optional, Iterator, Tuple, Type

from .iter import TreeIter

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def _size(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return node._count


class TreeNode(Generic[K, V]):
    def __init__(self, key: K, value: V):
        self._key: K = key
        self.value: V = value

        self_cls = self.__class__

        self._left: Optional[self_cls[K, V]] = None
        self._right: Optional[self_cls[K, V]] = None
        self._count: int = 1

    @property
    def key(self) -> K:
        """The key associated with this node.

        This property is read-only; the tree itself may rewrite it when
        removing a node with two children.
        """
        return self._key

    @property
    def count(self) -> int:
        """Number of nodes in the subtree rooted at this node, itself included."""
        return self._count

    def _update_count(self):
        self._count = 1 + _size(self._left) + _size(self._right)

    def _find_node(self, key: K) -> Optional[TreeNode[K, V]]:
        x = self
        while x is not None:
            if key < x.key:
                x = x._left
            elif x.key < key:
                x = x._right
            else:
                return x
        return None

    def _min_node(self) -> TreeNode[K, V]:
        x = self
        while x._left is not None:
            x = x._left
        return x

    def _max_node(self) -> TreeNode[K, V]:
        x = self
        while x._right is not None:
            x = x._right
        return x


class Tree(Generic[K, V], MutableMapping):
    def __init__(self, node_class: Type[TreeNode] = TreeNode):
        self._node_cls = node_class
        self._root: Optional[TreeNode[K, V]] = None

    def size(self) -> int:
        """Number of key-value pairs in the tree."""
        return _size(self._root)

    def is_empty(self) -> bool:
        return self.size() == 0

    def get_node(self, key: K) -> TreeNode[K, V]:
        """Directly retrieve a node within this tree.

        Raises KeyError if the tree does not contain the given key.
        """
        node = None
        if self._root is not None:
            node = self._root._find_node(key)
        if node is None:
            raise KeyError(key)
        return node

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Value associated with the given key, or `default` if there is none."""
        if self._root is None:
            return default
        node = self._root._find_node(key)
        if node is None:
            return default
        return node.value

    def contains(self, key: K) -> bool:
        return self.get(key) is not None

    def put(self, key: K, val: Optional[V]):
        """Associate `val` with `key`, replacing any previous value.

        Putting `None` removes the key instead, so `None` is never stored.
        """
        if val is None:
            logger.debug("put(%r, None): deleting key", key)
            self.delete(key)
            return
        self._root = self._put(key, val)

    def _put(self, key: K, val: V) -> TreeNode[K, V]:
        path: List[Tuple[TreeNode[K, V], bool]] = []
        x = self._root
        while x is not None:
            if key < x.key:
                path.append((x, True))
                x = x._left
            elif x.key < key:
                path.append((x, False))
                x = x._right
            else:
                x.value = val
                return self._root

        return self._fix_up(path, self._node_cls(key, val))

    def _fix_up(
        self,
        path: List[Tuple[TreeNode[K, V], bool]],
        subtree: Optional[TreeNode[K, V]],
    ) -> Optional[TreeNode[K, V]]:
        """Hang `subtree` below the last node of `path` and walk back to the root.

        Each entry of `path` is a node and whether the walk went to its left
        child. Counts are recomputed bottom-up; returns the new root.
        """
        for parent, went_left in reversed(path):
            if went_left:
                parent._left = subtree
            else:
                parent._right = subtree
            parent._update_count()
            subtree = parent
        return subtree

    def insert(self, key: K, val: Optional[V]) -> Optional[V]:
        """Like `put`, but returns the value previously stored for `key`."""
        old_val = self.get(key)
        self.put(key, val)
        return old_val

    def delete(self, key: K):
        """Remove `key` from the tree. Missing keys are ignored.

        A node with two children is not unlinked; it takes over the key of its
        in-order predecessor (the largest key of its left subtree), which is
        then removed from the left subtree. The node keeps its own value, so
        the predecessor key ends up associated with the deleted key's value.
        """
        if self.get(key) is None:
            logger.debug("delete(%r): key not present", key)
            return
        self._root = self._delete(key)

    def _delete(self, key: K) -> Optional[TreeNode[K, V]]:
        # key is known to be present
        path: List[Tuple[TreeNode[K, V], bool]] = []
        x = self._root
        while key < x.key or x.key < key:
            went_left = key < x.key
            path.append((x, went_left))
            x = x._left if went_left else x._right

        if x._left is None:
            return self._fix_up(path, x._right)
        elif x._right is None:
            return self._fix_up(path, x._left)

        # two children: promote the predecessor's key, keep this value
        path.append((x, True))
        pred = x._left
        while pred._right is not None:
            path.append((pred, False))
            pred = pred._right

        x._key = pred.key
        logger.debug("delete(%r): promoting predecessor %r", key, x._key)
        return self._fix_up(path, pred._left)

    def min(self) -> Tuple[K, V]:
        if self._root is None:
            raise IndexError("Tree is empty")
        node = self._root._min_node()
        return (node.key, node.value)

    def max(self) -> Tuple[K, V]:
        if self._root is None:
            raise IndexError("Tree is empty")
        node = self._root._max_node()
        return (node.key, node.value)

    def pop_min(self) -> Tuple[K, V]:
        r = self.min()
        self.delete(r[0])
        return r

    def pop_max(self) -> Tuple[K, V]:
        r = self.max()
        self.delete(r[0])
        return r

    def clear(self):
        self._root = None

    def _do_iter(
        self,
        mode: int,
        left_bound: Optional[K] = None,
        right_bound: Optional[K] = None,
        reverse: bool = False,
    ) -> TreeIter:
        if (
            left_bound is not None
            and right_bound is not None
            and (right_bound < left_bound)
        ):
            return self._do_iter(mode, right_bound, left_bound, reverse)

        return TreeIter(mode, self._root, left_bound, right_bound, reverse)

    def items(
        self,
        left_bound: Optional[K] = None,
        right_bound: Optional[K] = None,
        reverse: bool = False,
    ) -> Iterator[Tuple[K, V]]:
        return self._do_iter(TreeIter.ITEMS, left_bound, right_bound, reverse)

    def keys(
        self,
        left_bound: Optional[K] = None,
        right_bound: Optional[K] = None,
        reverse: bool = False,
    ) -> Iterator[K]:
        return self._do_iter(TreeIter.KEYS, left_bound, right_bound, reverse)

    def values(
        self,
        left_bound: Optional[K] = None,
        right_bound: Optional[K] = None,
        reverse: bool = False,
    ) -> Iterator[V]:
        return self._do_iter(TreeIter.VALS, left_bound, right_bound, reverse)

    def nodes(self, reverse: bool = False) -> Iterator[TreeNode[K, V]]:
        return self._do_iter(TreeIter.NODES, reverse=reverse)

    def __getitem__(self, key: K) -> V:
        return self.get_node(key).value

    def __setitem__(self, key: K, val: Optional[V]):
        self.put(key, val)

    def __delitem__(self, key: K):
        self.get_node(key)
        self.delete(key)

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __reversed__(self) -> Iterator[K]:
        return self.keys(reverse=True)

    def __len__(self) -> int:
        return self.size()
