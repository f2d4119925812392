"""WalkEvent: the unit of output of the depth-first walker.

A walk is reported as a stream of events rather than a stream of nodes.
Each node produces an ENTER event when it is opened and an EXIT event once
its whole subtree has been visited, so the stream brackets the tree.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..config import WalkEventType

T = TypeVar('T')


@dataclass(frozen=True)
class WalkEvent(Generic[T]):
    """Immutable (type, node) pair.

    Use the ``enter`` and ``exit`` factories rather than the constructor.
    """

    type: WalkEventType
    node: T

    @classmethod
    def enter(cls, node: T) -> 'WalkEvent[T]':
        """Create an ENTER event for node."""
        return cls(WalkEventType.ENTER, node)

    @classmethod
    def exit(cls, node: T) -> 'WalkEvent[T]':
        """Create an EXIT event for node."""
        return cls(WalkEventType.EXIT, node)

    @property
    def is_enter(self) -> bool:
        return self.type is WalkEventType.ENTER

    @property
    def is_exit(self) -> bool:
        return self.type is WalkEventType.EXIT

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.type.value}({self.node!r})"
