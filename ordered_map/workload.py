from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Type

import numpy as np
from numpy import random

from .tree import OrderedTree


def ascending_keys(n: int) -> Iterator[int]:
    yield from range(n)


def descending_keys(n: int) -> Iterator[int]:
    yield from range(n - 1, -1, -1)


def shuffled_keys(n: int, shuffle_seed: int) -> Iterator[int]:
    rng = random.default_rng(shuffle_seed)
    for k in rng.permutation(n):
        yield int(k)


def level_order_keys(n: int) -> Iterator[int]:
    """Yield `range(n)` so that inserting in order builds a minimum-height tree.

    Each half-open range contributes its midpoint, breadth first.
    """
    pending = deque([(0, n)])
    while len(pending) > 0:
        lo, hi = pending.popleft()
        if lo >= hi:
            continue
        mid = (lo + hi) // 2
        yield mid
        pending.append((lo, mid))
        pending.append((mid + 1, hi))


def build_tree(
    keys: Iterable[int], tree_cls: Type[OrderedTree] = OrderedTree
) -> OrderedTree:
    tree = tree_cls()
    for idx, k in enumerate(keys):
        tree.put(k, idx)
    return tree


def height_profile(n: int, seeds: Iterable[int]) -> np.ndarray:
    """Heights of trees built from seeded random permutations of `range(n)`."""
    return np.array(
        [build_tree(shuffled_keys(n, seed)).height() for seed in seeds], dtype=int
    )
