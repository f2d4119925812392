"""Tests for copy_tree: structural copies into a different node type."""

import logging
from unittest.mock import Mock

import pytest

from gentreelib import copy_tree, pre_order
from gentreelib.testing import LinkRecorder, MappingTree
from tree_helpers import random_tree


def make_dict_node(name):
    return {'name': name, 'children': []}


def attach_dict_child(parent, child):
    parent['children'].append(child)


class TestCopyTreeExample:
    """The lowercase copy of A[B[D], C]."""

    def test_result_and_links(self, example_tree):
        links = LinkRecorder()
        result = copy_tree('A', example_tree, str.lower, links)

        assert result == ['a', 'b', 'd', 'c']
        assert links.links == [('a', 'b'), ('b', 'd'), ('a', 'c')]
        assert links.children_of('a') == ['b', 'c']

    def test_root_is_first_and_never_attached(self, example_tree):
        links = LinkRecorder()
        result = copy_tree('A', example_tree, str.lower, links)

        assert result[0] == 'a'
        assert all(child != 'a' for _, child in links.links)

    def test_single_node(self):
        attach = Mock()
        result = copy_tree('X', lambda n: [], str.lower, attach)

        assert result == ['x']
        attach.assert_not_called()

    def test_call_order(self, example_tree):
        calls = []

        def create(node):
            calls.append(('create', node))
            return node.lower()

        def attach(parent, child):
            calls.append(('attach', parent, child))

        copy_tree('A', example_tree, create, attach)

        # A child is attached before any of its own children are created
        assert calls == [
            ('create', 'A'),
            ('create', 'B'),
            ('attach', 'a', 'b'),
            ('create', 'D'),
            ('attach', 'b', 'd'),
            ('create', 'C'),
            ('attach', 'a', 'c'),
        ]


class TestCopyTreeStructure:
    """Isomorphism on larger trees."""

    @pytest.mark.parametrize("seed", range(8))
    def test_destination_is_isomorphic(self, seed):
        tree = random_tree(seed, 50)
        result = copy_tree(0, tree, make_dict_node, attach_dict_child)

        assert len(result) == 50
        for source, dest in zip(pre_order(0, tree), result):
            assert dest['name'] == source
            assert [c['name'] for c in dest['children']] == list(tree.mapping.get(source, []))

    @pytest.mark.parametrize("seed", range(4))
    def test_callback_counts(self, seed):
        tree = random_tree(seed, 40)
        create = Mock(side_effect=make_dict_node)
        attach = Mock(side_effect=attach_dict_child)

        copy_tree(0, tree, create, attach)

        assert create.call_count == 40
        assert attach.call_count == 39
        assert tree.call_counts == {node: 1 for node in range(40)}

    def test_deep_chain(self):
        tree = MappingTree.chain(50000)
        result = copy_tree(0, tree, make_dict_node, attach_dict_child)

        assert len(result) == 50000
        assert result[0]['children'] == [result[1]]
        assert result[-1]['children'] == []

    def test_adapter_and_function_give_same_copy(self, example_tree):
        from_adapter = copy_tree('A', example_tree, str.lower, LinkRecorder())
        from_function = copy_tree(
            'A', lambda n: example_tree.mapping.get(n, []), str.lower, LinkRecorder()
        )
        assert from_adapter == ['a', 'b', 'd', 'c']
        assert from_function == from_adapter


class TestCopyTreeErrors:
    """Callback failures abort the copy unchanged."""

    def test_create_failure_leaves_partial_tree(self, example_tree):
        links = LinkRecorder()

        def create(node):
            if node == 'D':
                raise ValueError("cannot copy D")
            return node.lower()

        with pytest.raises(ValueError, match="cannot copy D"):
            copy_tree('A', example_tree, create, links)

        assert links.links == [('a', 'b')]

    def test_attach_failure_propagates(self, example_tree):
        attach = Mock(side_effect=RuntimeError("full"))
        with pytest.raises(RuntimeError, match="full"):
            copy_tree('A', example_tree, str.lower, attach)
        attach.assert_called_once_with('a', 'b')

    def test_enumeration_failure_propagates(self):
        def children(node):
            raise LookupError(node)

        with pytest.raises(LookupError):
            copy_tree('A', children, str.lower, LinkRecorder())


def test_copy_logs_summary(example_tree, caplog):
    caplog.set_level(logging.DEBUG, logger="gentreelib")
    copy_tree('A', example_tree, str.lower, LinkRecorder())
    assert "Copied tree rooted at 'A' into 4 nodes" in caplog.messages
