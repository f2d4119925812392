"""GenTreeLib - Generic, non-recursive tree traversal.

GenTreeLib walks any tree structure - XML, JSON, ASTs, object graphs -
given only a function that returns a node's ordered children. Nodes need
no base class.

Core operations:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from gentreelib import walk, pre_order, post_order, copy_tree
━━━━━━━━━━━━━━━━━━━━━━━━━━

``walk`` reports a depth-first traversal as ENTER/EXIT events using an
explicit stack, so deep trees never hit the recursion limit. Everything
else in the library is built on that event stream.
"""

__version__ = "0.1.0"

from .config import (
    WalkEventType,
    TraversalStrategy,
    TraversalConfig,
    parse_strategy,
)
from .core import (
    WalkEvent,
    TreeAdapter,
    walk,
    pre_order,
    post_order,
    copy_tree,
    TreeTraverser,
    WalkEventTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Config
    "WalkEventType",
    "TraversalStrategy",
    "TraversalConfig",
    "parse_strategy",
    # Core
    "WalkEvent",
    "TreeAdapter",
    "walk",
    "pre_order",
    "post_order",
    "copy_tree",
    "TreeTraverser",
    "WalkEventTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    # API
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_tree_paths",
    "get_leaf_nodes",
    "get_tree_stats",
]
