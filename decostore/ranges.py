"""
Decostore Ranges - Points, Ranges and Range Geometry
====================================================

A decoration is a ``Range`` with optional presentation metadata. Ranges are
immutable values: two ranges are equal when their positions and their metadata
are equal, whatever instance they live in.

Positions are ``Point`` objects, a path into the document tree plus a character
offset inside the text node at that path.

Usage:
    text = Range(Point((0,), 0), Point((0,), 10))
    mark = Range(Point((0,), 2), Point((0,), 12), placeholder="hint")

    intersection(mark, text)
    # Range(anchor=Point(path=(0,), offset=2), focus=Point(path=(0,), offset=10),
    #       placeholder='hint', data={})
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

Path = Tuple[int, ...]


def compare_paths(path: Path, another: Path) -> int:
    """
    Compare two paths over their common prefix.

    Returns -1, 0 or 1. An ancestor path compares equal to any of its
    descendants since neither comes before the other in the document.
    """
    for left, right in zip(path, another):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


@dataclass(frozen=True)
class Point:
    """A position in the document: a node path plus an offset into its text."""

    path: Path
    offset: int = 0

    def compare(self, other: "Point") -> int:
        """Return -1, 0 or 1 depending on document order."""
        result = compare_paths(self.path, other.path)
        if result != 0:
            return result
        if self.offset < other.offset:
            return -1
        if self.offset > other.offset:
            return 1
        return 0

    def is_before(self, other: "Point") -> bool:
        return self.compare(other) < 0

    def is_after(self, other: "Point") -> bool:
        return self.compare(other) > 0


@dataclass(frozen=True)
class Range:
    """
    An ordered (anchor, focus) pair of points plus optional metadata.

    ``placeholder`` and ``data`` are the metadata carried by decorations.
    ``data`` takes part in equality but not in hashing, so ranges stay hashable
    as long as their points are.
    """

    anchor: Point
    focus: Point
    placeholder: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict, hash=False)

    def is_backward(self) -> bool:
        """True when the focus comes before the anchor."""
        return self.anchor.is_after(self.focus)

    def is_collapsed(self) -> bool:
        return self.anchor.compare(self.focus) == 0

    def edges(self) -> Tuple[Point, Point]:
        """Return (start, end) in document order."""
        if self.is_backward():
            return self.focus, self.anchor
        return self.anchor, self.focus

    def start(self) -> Point:
        return self.edges()[0]

    def end(self) -> Point:
        return self.edges()[1]

    def includes(self, point: Point) -> bool:
        """True when ``point`` lies between the range edges, edges included."""
        start, end = self.edges()
        return point.compare(start) >= 0 and point.compare(end) <= 0

    def with_edges(self, anchor: Point, focus: Point) -> "Range":
        """Return a copy with new points and the same metadata."""
        return replace(self, anchor=anchor, focus=focus)


def intersection(range_: Range, another: Range) -> Optional[Range]:
    """
    Return the overlap of two ranges, or ``None`` when they are disjoint.

    The result is a forward range carrying the metadata of ``range_``. Ranges
    that merely touch produce a collapsed range at the shared point.
    """
    start1, end1 = range_.edges()
    start2, end2 = another.edges()
    start = start2 if start1.is_before(start2) else start1
    end = end2 if end1.is_after(end2) else end1

    if start.is_after(end):
        return None
    return range_.with_edges(start, end)
