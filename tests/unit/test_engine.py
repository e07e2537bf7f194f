"""Unit tests for decoration computation."""

import pytest

from decostore import Node, NotFoundError, Point, Range, compute_decorations
from tests.utils import span


@pytest.mark.unit
@pytest.mark.engine
def test_decoration_inside_node_is_returned(document, text_node):
    """A decoration fully inside the node is returned unchanged"""

    def decorate(entry):
        node, path = entry
        return [span(path, 3, 7)] if node is text_node else []

    assert compute_decorations(document, text_node, decorate) == [span((0,), 3, 7)]


@pytest.mark.unit
@pytest.mark.engine
def test_decoration_is_clipped_to_node(document, text_node):
    """A decoration extending past the node ends at the node boundary"""

    def decorate(entry):
        node, path = entry
        return [span(path, 2, 12)] if node is text_node else []

    assert compute_decorations(document, text_node, decorate) == [span((0,), 2, 10)]


@pytest.mark.unit
@pytest.mark.engine
def test_ancestor_decorations_are_clipped_and_disjoint_ones_dropped(nested_document):
    """Ancestor-level ranges are clipped; ranges missing the node are dropped"""
    world = nested_document.node((0, 1))

    def decorate(entry):
        node, path = entry
        if path == ():
            return [
                Range(Point((0, 0), 2), Point((1, 0), 3)),  # covers "world"
                span((1, 0), 0, 5),  # only "again"
            ]
        return []

    assert compute_decorations(nested_document, world, decorate) == [
        span((0, 1), 0, 5)
    ]


@pytest.mark.unit
@pytest.mark.engine
def test_decorations_follow_root_to_node_order(nested_document):
    """Root decorations come before parent ones, which come before the node's"""
    hello = nested_document.node((0, 0))

    def decorate(entry):
        node, path = entry
        level = len(path)
        return [
            span((0, 0), 0, 1, data={"level": level, "n": 0}),
            span((0, 0), 1, 2, data={"level": level, "n": 1}),
        ]

    result = compute_decorations(nested_document, hello, decorate)

    assert [(d.data["level"], d.data["n"]) for d in result] == [
        (0, 0),
        (0, 1),
        (1, 0),
        (1, 1),
        (2, 0),
        (2, 1),
    ]


@pytest.mark.unit
@pytest.mark.engine
def test_decorate_receives_each_ancestor_entry(nested_document):
    """The decorate function is invoked once per root-to-node entry"""
    seen = []

    def decorate(entry):
        seen.append(entry[1])
        return []

    compute_decorations(nested_document, nested_document.node((1, 0)), decorate)

    assert seen == [(), (1,), (1, 0)]


@pytest.mark.unit
@pytest.mark.engine
def test_element_node_collects_its_ancestors_only(nested_document):
    """Decorating an element does not visit its descendants"""
    paragraph = nested_document.node((0,))
    seen = []

    def decorate(entry):
        seen.append(entry[1])
        return [span((0, 1), 1, 3)] if entry[1] == (0,) else []

    result = compute_decorations(nested_document, paragraph, decorate)

    assert seen == [(), (0,)]
    assert result == [span((0, 1), 1, 3)]


@pytest.mark.unit
@pytest.mark.engine
def test_duplicate_and_overlapping_ranges_are_kept(document, text_node):
    """No deduplication happens on the computed list"""

    def decorate(entry):
        node, path = entry
        if node is not text_node:
            return []
        return [span(path, 1, 4), span(path, 1, 4), span(path, 2, 6)]

    assert compute_decorations(document, text_node, decorate) == [
        span((0,), 1, 4),
        span((0,), 1, 4),
        span((0,), 2, 6),
    ]


@pytest.mark.unit
@pytest.mark.engine
def test_detached_node_raises_not_found(document):
    """Nodes outside the document propagate NotFoundError"""
    with pytest.raises(NotFoundError):
        compute_decorations(document, Node(text="stray"), lambda entry: [])


@pytest.mark.unit
@pytest.mark.engine
def test_decorate_errors_propagate(document, text_node):
    """Exceptions raised by the decorate function are not swallowed"""

    def decorate(entry):
        raise ValueError("bad decorate")

    with pytest.raises(ValueError, match="bad decorate"):
        compute_decorations(document, text_node, decorate)
