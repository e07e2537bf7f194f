"""
Range List Equality
===================

Structural comparison of decoration lists. Consumers use it to keep the list
they already hold when a recomputation produced an equal one, so nothing
downstream sees a change.
"""

from typing import Sequence

from ..ranges import Range


def is_range_list_equal(list_: Sequence[Range], another: Sequence[Range]) -> bool:
    """
    True iff both lists have the same length and every positional pair of
    ranges has equal anchor, focus and metadata.
    """
    if list_ is another:
        return True
    if len(list_) != len(another):
        return False

    for range_, other in zip(list_, another):
        if range_.anchor != other.anchor or range_.focus != other.focus:
            return False
        if range_.placeholder != other.placeholder or range_.data != other.data:
            return False
    return True
