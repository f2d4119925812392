"""Non-recursive depth-first walker.

``walk`` is the single traversal engine of GenTreeLib. Everything else
(pre-order, post-order, tree copies, the high-level API) consumes its
event stream and contains no traversal logic of its own.

The walk keeps an explicit stack of (node, entered) frames instead of
recursing, so tree depth is limited by memory rather than by the
interpreter's recursion limit.
"""

import logging
from collections.abc import Sequence
from typing import Iterable, Iterator, NamedTuple, TypeVar, Union

from .adapter import ChildrenFunction, TreeAdapter, resolve_children_function
from .events import WalkEvent

logger = logging.getLogger(__name__)

T = TypeVar('T')


class _WalkState(NamedTuple):
    """Stack frame of the walk."""
    node: object
    entered: bool


def _reversed_children(children: Iterable[T]) -> Iterator[T]:
    """Iterate children last to first.

    Sequences are read backwards by index; anything else has to be
    materialized first.
    """
    if isinstance(children, Sequence):
        return reversed(children)
    return reversed(list(children))


def walk(root: T,
         children: Union[ChildrenFunction, TreeAdapter],
         log_events: bool = False) -> Iterator[WalkEvent[T]]:
    """Walk a tree depth-first and report ENTER/EXIT events.

    The ENTER events come out in pre-order and the EXIT events in
    post-order. A node's EXIT always follows the EXIT of every one of its
    descendants and precedes its parent's EXIT.

    The returned iterator is lazy and single-pass. A node's children are
    enumerated only when the event after its ENTER is requested, so a
    consumer that stops early triggers no further calls into ``children``.

    Args:
        root: Node to start from
        children: Callable (or TreeAdapter) returning a node's ordered children
        log_events: Emit a DEBUG record for every event

    Returns:
        Iterator of WalkEvent

    Raises:
        TypeError: If children is neither callable nor a TreeAdapter

    Example:
        >>> tree = {'A': ['B', 'C'], 'B': ['D']}
        >>> [repr(e) for e in walk('A', lambda n: tree.get(n, []))][:3]
        ["WalkEvent.enter('A')", "WalkEvent.enter('B')", "WalkEvent.enter('D')"]
    """
    enumerate_children = resolve_children_function(children)
    return _walk(root, enumerate_children, log_events)


def _walk(root, enumerate_children, log_events):
    stack = [_WalkState(root, False)]
    emitted = 0

    while stack:
        node, entered = stack.pop()
        emitted += 1

        if not entered:
            if log_events:
                logger.debug("enter %r", node)
            yield WalkEvent.enter(node)

            stack.append(_WalkState(node, True))

            # Pushed last-to-first so they pop in their natural order
            for child in _reversed_children(enumerate_children(node)):
                stack.append(_WalkState(child, False))
        else:
            if log_events:
                logger.debug("exit %r", node)
            yield WalkEvent.exit(node)

    logger.debug("Walk from %r finished after %d events", root, emitted)


def pre_order(root: T,
              children: Union[ChildrenFunction, TreeAdapter],
              log_events: bool = False) -> Iterator[T]:
    """Yield nodes in the order they are entered (parent before children)."""
    return (event.node for event in walk(root, children, log_events) if event.is_enter)


def post_order(root: T,
               children: Union[ChildrenFunction, TreeAdapter],
               log_events: bool = False) -> Iterator[T]:
    """Yield nodes in the order they are exited (children before parent)."""
    return (event.node for event in walk(root, children, log_events) if event.is_exit)
