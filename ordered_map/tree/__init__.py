from .base import Tree, TreeNode
from .ordered import OrderedTree, OrderedNode
