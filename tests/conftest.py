"""Shared fixtures for GenTreeLib tests."""

import pytest

from gentreelib.testing import MappingTree


@pytest.fixture
def example_tree():
    """A[B[D], C] - the tree used throughout the documentation.

    Structure:
    A
    ├── B
    │   └── D
    └── C
    """
    return MappingTree({'A': ['B', 'C'], 'B': ['D']})
