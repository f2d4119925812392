#!/usr/bin/env python3
"""
Copy an XML document into plain dictionaries without recursion.

This example demonstrates:
- Walking an ElementTree with a one-line children function
- Printing an indented outline from the enter/exit event stream
- Building a differently-typed tree with copy_tree
"""

import logging
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from gentreelib import copy_tree, get_tree_stats, walk

DOCUMENT = """
<library>
  <shelf name="fiction">
    <book title="Dune"/>
    <book title="Solaris"/>
  </shelf>
  <shelf name="reference">
    <book title="SICP">
      <note>Second edition</note>
    </book>
  </shelf>
</library>
"""


def element_children(element):
    """Children of an ElementTree element, in document order."""
    return list(element)


def print_outline(root) -> None:
    """Indent each element by the number of currently open ancestors."""
    depth = 0
    for event in walk(root, element_children):
        if event.is_enter:
            label = event.node.attrib.get('name') or event.node.attrib.get('title') or ''
            print(f"{'  ' * depth}<{event.node.tag}> {label}".rstrip())
            depth += 1
        else:
            depth -= 1


def to_dicts(root) -> dict:
    """Copy the element tree into nested dicts and return the root dict."""
    def create(element):
        return {'tag': element.tag, 'attrib': dict(element.attrib), 'children': []}

    def attach(parent, child):
        parent['children'].append(child)

    return copy_tree(root, element_children, create, attach)[0]


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    root = ET.fromstring(DOCUMENT)

    print("Outline:")
    print_outline(root)

    copied = to_dicts(root)
    print(f"\nCopied root: {copied['tag']} with {len(copied['children'])} shelves")

    stats = get_tree_stats(root, element_children)
    print(f"Elements: {stats['total_nodes']}, leaves: {stats['leaf_nodes']}, "
          f"max depth: {stats['max_depth']}")


if __name__ == "__main__":
    main()
