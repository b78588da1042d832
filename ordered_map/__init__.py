from . import tree
from . import workload

from .tree import Tree, OrderedTree
from .workload import (
    ascending_keys,
    descending_keys,
    shuffled_keys,
    level_order_keys,
    build_tree,
    height_profile,
)

__all__ = [
    "Tree",
    "OrderedTree",
    "ascending_keys",
    "descending_keys",
    "shuffled_keys",
    "level_order_keys",
    "build_tree",
    "height_profile",
]
