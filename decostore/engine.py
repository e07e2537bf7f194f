"""
Decoration Computation
======================

Computes the decorations that apply to one node:

1. resolve the node's path and the range it spans
2. walk the ancestor chain, root first, down to the node itself
3. run the decorate function on every entry
4. clip each candidate to the node's range, dropping disjoint ones
5. keep root-to-node order, then emission order within an entry

Errors from the document model or from the decorate function propagate.
"""

from typing import Any

from .document import DocumentAdapter
from .registry import Decorate, DecorationsList


def compute_decorations(
    document: DocumentAdapter, node: Any, decorate: Decorate
) -> DecorationsList:
    """Return the decorations of ``node`` under ``decorate``, clipped to the node."""
    path = document.find_path(node)
    node_range = document.range(path)

    decorations: DecorationsList = []
    for entry in document.ancestor_entries(path):
        for candidate in decorate(entry):
            clipped = document.range_intersection(candidate, node_range)
            if clipped is not None:
                decorations.append(clipped)
    return decorations
