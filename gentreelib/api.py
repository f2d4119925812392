"""High-level API for GenTreeLib.

This module provides simple, functional interfaces for common tree
operations. Every function here is a consumer of the walker's event
stream; none of them walk the tree on their own.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .config import TraversalConfig, TraversalStrategy
from .core.adapter import ChildrenFunction, TreeAdapter
from .core.traverser import create_traverser
from .core.walker import pre_order, walk


def traverse_tree(
    root: Any,
    children: Union[ChildrenFunction, TreeAdapter],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    config: Optional[TraversalConfig] = None,
    **kwargs
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        children: Callable (or TreeAdapter) returning a node's children
        strategy: Traversal strategy (events, pre_order, post_order)
        config: Complete configuration; overrides strategy and kwargs
        **kwargs: Additional TraversalConfig options (e.g. log_events)

    Returns:
        Lazy iterator over nodes, or over WalkEvents for the events strategy

    Example:
        >>> tree = {'A': ['B', 'C'], 'B': ['D']}
        >>> list(traverse_tree('A', lambda n: tree.get(n, []), 'post_order'))
        ['D', 'B', 'C', 'A']
    """
    if config is None:
        config = TraversalConfig.from_kwargs(strategy=strategy, **kwargs)

    traverser = create_traverser(config.strategy, children, config.log_events)
    return traverser.traverse(root)


def count_nodes(root: Any, children: Union[ChildrenFunction, TreeAdapter]) -> int:
    """Count nodes in a tree.

    Args:
        root: Starting node for traversal
        children: Callable (or TreeAdapter) returning a node's children

    Returns:
        Number of nodes, root included
    """
    count = 0
    for _ in pre_order(root, children):
        count += 1
    return count


def find_nodes(
    root: Any,
    children: Union[ChildrenFunction, TreeAdapter],
    predicate: Callable[[Any], bool]
) -> Iterator[Any]:
    """Find nodes that match a predicate, in pre-order.

    The search is lazy: taking only the first match stops the walk there.

    Args:
        root: Starting node for traversal
        children: Callable (or TreeAdapter) returning a node's children
        predicate: Function that returns True for matching nodes

    Returns:
        Iterator over matching nodes

    Example:
        >>> tree = {'A': ['B', 'C'], 'B': ['D']}
        >>> next(find_nodes('A', lambda n: tree.get(n, []), lambda n: n > 'B'))
        'D'
    """
    return (node for node in pre_order(root, children) if predicate(node))


def get_tree_paths(
    root: Any,
    children: Union[ChildrenFunction, TreeAdapter]
) -> Iterator[List[Any]]:
    """Get the path from root to each node, in pre-order.

    Args:
        root: Starting node for traversal
        children: Callable (or TreeAdapter) returning a node's children

    Returns:
        Iterator over lists of nodes, root first; each list is a new object

    Example:
        >>> tree = {'A': ['B', 'C'], 'B': ['D']}
        >>> list(get_tree_paths('A', lambda n: tree.get(n, [])))
        [['A'], ['A', 'B'], ['A', 'B', 'D'], ['A', 'C']]
    """
    return _paths(walk(root, children))


def _paths(events):
    ancestors = []
    for event in events:
        if event.is_enter:
            ancestors.append(event.node)
            yield list(ancestors)
        else:
            ancestors.pop()


def get_leaf_nodes(
    root: Any,
    children: Union[ChildrenFunction, TreeAdapter]
) -> Iterator[Any]:
    """Get all leaf nodes in a tree, left to right.

    A leaf is a node whose ENTER event is immediately followed by its own
    EXIT event.

    Args:
        root: Starting node for traversal
        children: Callable (or TreeAdapter) returning a node's children

    Returns:
        Iterator over leaf nodes
    """
    return _leaves(walk(root, children))


def _leaves(events):
    previous = None
    for event in events:
        if event.is_exit and previous is not None and previous.is_enter:
            yield event.node
        previous = event


def get_tree_stats(
    root: Any,
    children: Union[ChildrenFunction, TreeAdapter]
) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting node for traversal
        children: Callable (or TreeAdapter) returning a node's children

    Returns:
        Dictionary with tree statistics

    Example:
        >>> tree = {'A': ['B', 'C'], 'B': ['D']}
        >>> stats = get_tree_stats('A', lambda n: tree.get(n, []))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (4, 2, 2)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    # Root sits at depth 0 once entered
    depth = -1
    previous = None

    for event in walk(root, children):
        if event.is_enter:
            depth += 1
            stats['total_nodes'] += 1
            stats['max_depth'] = max(stats['max_depth'], depth)
            stats['depths'][depth] = stats['depths'].get(depth, 0) + 1
        else:
            if previous is not None and previous.is_enter:
                stats['leaf_nodes'] += 1
            depth -= 1
        previous = event

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every node but the root is somebody's child
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
