"""
Shared pytest fixtures and configuration for decostore tests.
"""

import pytest

from decostore import Document, Node


@pytest.fixture
def text_node():
    """Text node spanning offsets [0, 10]."""
    return Node(text="0123456789")


@pytest.fixture
def document(text_node):
    """Document whose root holds a single text node."""
    root = Node(type="root")
    root.add_child(text_node)
    return Document(root)


@pytest.fixture
def nested_document():
    """
    root
    ├── paragraph (0,)
    │   ├── "hello" (0, 0)
    │   └── "world" (0, 1)
    └── paragraph (1,)
        └── "again" (1, 0)
    """
    root = Node(type="root")
    first = root.add_child(Node(type="paragraph"))
    first.add_child(Node(text="hello"))
    first.add_child(Node(text="world"))
    second = root.add_child(Node(type="paragraph"))
    second.add_child(Node(text="again"))
    return Document(root)
