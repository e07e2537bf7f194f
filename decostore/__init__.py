"""
Decostore - Cached Decorations for Document Trees
=================================================

Computes, caches and republishes decorations: non-persistent ranges derived
from a user supplied decorate function over the nodes of a document tree.
Consumers read the decorations of one node and are notified only when the
decorate function itself is replaced.
"""

from .binding import DecorationsBinding
from .cache import CacheEntry, DecorationCache
from .document import Document, DocumentAdapter, Node, NodeEntry
from .engine import compute_decorations
from .errors import ConfigurationError, DecorationError, NotFoundError
from .ranges import Path, Point, Range, compare_paths, intersection
from .registry import Decorate, DecorateRegistry, DecorationsList
from .store import DecorationStore, create_store
from .util.listener_set import ListenerSet
from .util.range_list import is_range_list_equal

__all__ = [
    # Store
    "DecorationStore",
    "create_store",
    "DecorationsBinding",
    # Building blocks
    "DecorateRegistry",
    "DecorationCache",
    "CacheEntry",
    "ListenerSet",
    "compute_decorations",
    "is_range_list_equal",
    # Document model
    "Document",
    "DocumentAdapter",
    "Node",
    "NodeEntry",
    # Ranges
    "Path",
    "Point",
    "Range",
    "compare_paths",
    "intersection",
    # Types
    "Decorate",
    "DecorationsList",
    # Exceptions
    "DecorationError",
    "ConfigurationError",
    "NotFoundError",
]
