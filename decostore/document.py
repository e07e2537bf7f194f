"""
Decostore Document - Document Model Adapter
===========================================

The store never walks the document itself. Everything it needs is behind the
``DocumentAdapter`` protocol:

- ``find_path(node)``: path of a node, ``NotFoundError`` when it is detached
- ``range(path)``: full range spanned by the subtree at ``path``
- ``ancestor_entries(path)``: ``(node, path)`` pairs from the root down to
  and including the node at ``path``
- ``range_intersection(a, b)``: geometric overlap or ``None``

``Document`` is an in-memory implementation over a tree of ``Node`` objects.
Leaves carry text, elements carry children. Points always address text leaves.

Usage:
    root = Node(type="root")
    para = root.add_child(Node(type="paragraph"))
    text = para.add_child(Node(text="hello world"))

    doc = Document(root)
    doc.find_path(text)           # (0, 0)
    doc.range(doc.find_path(text))
    # Range(anchor=Point((0, 0), 0), focus=Point((0, 0), 11))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .errors import NotFoundError
from .ranges import Path, Point, Range, intersection

NodeEntry = Tuple[Any, Path]


class DocumentAdapter(Protocol):
    """What the decoration store consumes from a document model."""

    def find_path(self, node: Any) -> Path: ...

    def range(self, path: Path) -> Range: ...

    def ancestor_entries(self, path: Path) -> Iterator[NodeEntry]: ...

    def range_intersection(self, range_: Range, another: Range) -> Optional[Range]: ...


@dataclass(eq=False)
class Node:
    """
    A node in the document tree.

    Nodes compare by identity, so two paragraphs with the same text are still
    two different nodes.
    """

    text: Optional[str] = None
    type: str = "text"
    children: List[Node] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_text(self) -> bool:
        return self.text is not None

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()

    def add_child(self, child: Node) -> Node:
        """Add a child node and return it for chaining."""
        if self.is_text:
            raise ValueError("Text nodes cannot have children")
        self.children.append(child)
        return child


class Document:
    """In-memory document tree implementing ``DocumentAdapter``."""

    def __init__(self, root: Node):
        self.root = root

    def node(self, path: Path) -> Node:
        """Resolve a path to its node."""
        current = self.root
        for depth, index in enumerate(path):
            if index < 0 or index >= len(current.children):
                raise NotFoundError(f"No node at path {tuple(path[: depth + 1])}")
            current = current.children[index]
        return current

    def find_path(self, node: Node) -> Path:
        """Return the path of ``node``, searched by identity."""
        stack: List[Tuple[Node, Path]] = [(self.root, ())]
        while stack:
            current, path = stack.pop()
            if current is node:
                return path
            for index in range(len(current.children) - 1, -1, -1):
                stack.append((current.children[index], path + (index,)))
        raise NotFoundError(f"Node {node!r} is not part of the document")

    def texts(self, path: Path = ()) -> Iterator[Tuple[Node, Path]]:
        """Yield (leaf, path) for every text node under ``path`` in document order."""
        stack = [(self.node(path), tuple(path))]
        while stack:
            current, current_path = stack.pop()
            if current.is_text:
                yield current, current_path
                continue
            for index in range(len(current.children) - 1, -1, -1):
                stack.append((current.children[index], current_path + (index,)))

    def range(self, path: Path) -> Range:
        """Full range of the subtree at ``path``, first leaf start to last leaf end."""
        leaves = list(self.texts(path))
        if not leaves:
            point = Point(tuple(path), 0)
            return Range(point, point)
        first, first_path = leaves[0]
        last, last_path = leaves[-1]
        return Range(Point(first_path, 0), Point(last_path, len(last.text)))

    def ancestor_entries(self, path: Path) -> Iterator[NodeEntry]:
        """Yield (node, path) from the root down to and including ``path``."""
        current = self.root
        yield current, ()
        for depth, index in enumerate(path):
            if index < 0 or index >= len(current.children):
                raise NotFoundError(f"No node at path {tuple(path[: depth + 1])}")
            current = current.children[index]
            yield current, tuple(path[: depth + 1])

    def range_intersection(self, range_: Range, another: Range) -> Optional[Range]:
        return intersection(range_, another)
