"""TreeAdapter abstraction for GenTreeLib.

The walker never asks a node for its children directly. Navigation is
supplied from outside, either as a plain function ``node -> children`` or
as a TreeAdapter whose ``get_children`` method plays the same role. Nodes
therefore need no base class and can be any Python value.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, TypeVar, Union

T = TypeVar('T')

ChildrenFunction = Callable[[T], Iterable[T]]


class TreeAdapter(ABC, Generic[T]):
    """Abstract adapter for navigating a specific type of tree structure.

    Subclass this when child enumeration needs state of its own (a
    connection, a lookup table, a filter) that does not belong on the
    nodes. Adapters are callable, so an adapter instance can be passed
    anywhere a children function is accepted.
    """

    @abstractmethod
    def get_children(self, node: T) -> Iterable[T]:
        """Get the ordered children of node.

        Called at most once per node per traversal. The result is
        consumed completely at the moment the node is entered, so it may
        be a list, a tuple or a one-shot iterator.

        Args:
            node: The parent node

        Returns:
            Iterable of child nodes in their natural order
        """
        pass

    def __call__(self, node: T) -> Iterable[T]:
        return self.get_children(node)


def resolve_children_function(
    children: Union[ChildrenFunction, TreeAdapter]
) -> ChildrenFunction:
    """Normalize the children argument accepted by the public API.

    Args:
        children: A callable mapping a node to its children, or a TreeAdapter

    Returns:
        Callable mapping a node to its children

    Raises:
        TypeError: If children is neither callable nor a TreeAdapter
    """
    if isinstance(children, TreeAdapter):
        return children.get_children
    if callable(children):
        return children
    raise TypeError(
        f"children must be a callable or a TreeAdapter, "
        f"got {type(children).__name__}"
    )
