"""Test fixtures for GenTreeLib consumers.

These helpers describe small trees without defining a node class and
record how the library calls back into caller-supplied functions, so a
test can assert on call counts and call order.
"""

from collections import Counter
from typing import Any, Dict, Hashable, List, Sequence, Tuple

from ..core.adapter import TreeAdapter


class MappingTree(TreeAdapter):
    """Tree described by a ``{parent: [children, ...]}`` mapping.

    Nodes missing from the mapping are leaves. Every ``get_children`` call
    is recorded, which makes it easy to check that a traversal enumerates
    each node exactly once, or not at all after the consumer stopped.

    Example:
        tree = MappingTree({'A': ['B', 'C'], 'B': ['D']})
        assert list(pre_order('A', tree)) == ['A', 'B', 'D', 'C']
        assert tree.call_counts['A'] == 1
    """

    def __init__(self, mapping: Dict[Hashable, Sequence[Hashable]]):
        self.mapping = mapping
        self.calls: List[Hashable] = []
        self.call_counts: Counter = Counter()

    @classmethod
    def chain(cls, length: int) -> 'MappingTree':
        """Build a degenerate tree 0 -> 1 -> ... -> length - 1."""
        return cls({i: [i + 1] for i in range(length - 1)})

    @classmethod
    def from_nested(cls, nested: Tuple[Any, list]) -> 'MappingTree':
        """Build from ``(node, [subtree, ...])`` tuples.

        Example:
            MappingTree.from_nested(('A', [('B', [('D', [])]), ('C', [])]))
        """
        mapping = {}
        pending = [nested]
        while pending:
            node, subtrees = pending.pop()
            mapping[node] = [child for child, _ in subtrees]
            pending.extend(subtrees)
        return cls(mapping)

    def get_children(self, node: Hashable) -> Sequence[Hashable]:
        self.calls.append(node)
        self.call_counts[node] += 1
        return self.mapping.get(node, [])

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()
        self.call_counts.clear()


class LinkRecorder:
    """Callable usable as ``attach_child`` that records every link.

    Example:
        links = LinkRecorder()
        copy_tree('A', tree, str.lower, links)
        assert links.links == [('a', 'b'), ('b', 'd'), ('a', 'c')]
    """

    def __init__(self):
        self.links: List[Tuple[Any, Any]] = []

    def __call__(self, parent: Any, child: Any) -> None:
        self.links.append((parent, child))

    def children_of(self, parent: Any) -> List[Any]:
        """Children attached to parent, in attachment order."""
        return [child for p, child in self.links if p == parent]
