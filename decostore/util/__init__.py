"""Decostore utilities: listener bookkeeping and range list comparison."""

from .listener_set import ListenerSet
from .range_list import is_range_list_equal

__all__ = ["ListenerSet", "is_range_list_equal"]
