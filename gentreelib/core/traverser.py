"""Tree traversal strategies for GenTreeLib.

Traversers are the object-oriented face of the walker: they bind a
children function (or TreeAdapter) once and can then traverse any number
of roots. They work with any node type.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Union

from ..config import TraversalStrategy, parse_strategy
from .adapter import ChildrenFunction, TreeAdapter, resolve_children_function
from .walker import post_order, pre_order, walk


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self,
                 children: Union[ChildrenFunction, TreeAdapter],
                 log_events: bool = False):
        """Initialize traverser with a way to enumerate children.

        Args:
            children: Callable (or TreeAdapter) returning a node's children
            log_events: Emit a DEBUG record for every walk event

        Raises:
            TypeError: If children is neither callable nor a TreeAdapter
        """
        self.children = resolve_children_function(children)
        self.log_events = log_events

    @abstractmethod
    def traverse(self, root: Any) -> Iterator[Any]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal

        Returns:
            Lazy iterator over the traversal's output
        """
        pass


class WalkEventTraverser(TreeTraverser):
    """Yields the raw ENTER/EXIT events of the walk."""

    def traverse(self, root: Any) -> Iterator[Any]:
        return walk(root, self.children, log_events=self.log_events)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Good for copying trees or prefix
    notation.
    """

    def traverse(self, root: Any) -> Iterator[Any]:
        return pre_order(root, self.children, self.log_events)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent, once the entire subtree has been
    processed. Good for deletion or calculating aggregate values.
    """

    def traverse(self, root: Any) -> Iterator[Any]:
        return post_order(root, self.children, self.log_events)


_TRAVERSERS = {
    TraversalStrategy.EVENTS: WalkEventTraverser,
    TraversalStrategy.PRE_ORDER: DepthFirstPreOrderTraverser,
    TraversalStrategy.POST_ORDER: DepthFirstPostOrderTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str],
                     children: Union[ChildrenFunction, TreeAdapter],
                     log_events: bool = False) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (events, pre_order, post_order, ...)
        children: Callable (or TreeAdapter) returning a node's children
        log_events: Emit a DEBUG record for every walk event

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)](children, log_events)
