"""Testing utilities for GenTreeLib consumers."""

from .fixtures import MappingTree, LinkRecorder

__all__ = ['MappingTree', 'LinkRecorder']
