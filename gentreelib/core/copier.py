"""Structural tree copy driven by the walker's event stream."""

import logging
from typing import Callable, List, TypeVar, Union

from .adapter import ChildrenFunction, TreeAdapter
from .walker import walk

logger = logging.getLogger(__name__)

TSrc = TypeVar('TSrc')
TDest = TypeVar('TDest')


def copy_tree(src_root: TSrc,
              children: Union[ChildrenFunction, TreeAdapter],
              create_dest_node: Callable[[TSrc], TDest],
              attach_child: Callable[[TDest, TDest], None]) -> List[TDest]:
    """Build a tree of a different node type with the same shape as the source.

    ``create_dest_node`` is called once per source node, in pre-order.
    ``attach_child(parent, child)`` is called once per non-root node, right
    after the child is created and before any of its own children are
    attached. The destination nodes belong to the caller; this function
    only keeps the chain of currently open ancestors while it runs.

    If a callback raises, the exception propagates unchanged and whatever
    was already created and attached is left as it is.

    Args:
        src_root: Root of the source tree
        children: Callable (or TreeAdapter) returning a source node's children
        create_dest_node: Maps a source node to a new destination node
        attach_child: Links a destination child to its destination parent

    Returns:
        Created destination nodes in creation (pre-)order; the first one is
        the destination root

    Example:
        >>> tree = {'A': ['B', 'C'], 'B': ['D']}
        >>> links = []
        >>> copy_tree('A', lambda n: tree.get(n, []), str.lower,
        ...           lambda p, c: links.append((p, c)))
        ['a', 'b', 'd', 'c']
        >>> links
        [('a', 'b'), ('b', 'd'), ('a', 'c')]
    """
    ancestors: List[TDest] = []
    dest_nodes: List[TDest] = []

    for event in walk(src_root, children):
        if event.is_enter:
            dest_node = create_dest_node(event.node)

            # Top of the ancestor stack is the new node's parent
            if ancestors:
                attach_child(ancestors[-1], dest_node)

            ancestors.append(dest_node)
            dest_nodes.append(dest_node)
        else:
            ancestors.pop()

    logger.debug("Copied tree rooted at %r into %d nodes", src_root, len(dest_nodes))
    return dest_nodes
