"""Core components of GenTreeLib.

The walker is the only traversal engine; traversers and the tree copier
are consumers of its event stream.
"""

from .events import WalkEvent
from .adapter import TreeAdapter, resolve_children_function
from .walker import walk, pre_order, post_order
from .copier import copy_tree
from .traverser import (
    TreeTraverser,
    WalkEventTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)

__all__ = [
    "WalkEvent",
    "TreeAdapter",
    "resolve_children_function",
    "walk",
    "pre_order",
    "post_order",
    "copy_tree",
    "TreeTraverser",
    "WalkEventTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
]
