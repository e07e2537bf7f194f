"""
Decoration Cache
================

Per-node memo of computed decorations, bounded by a cachetools ``LRUCache``.

Entries are keyed by node identity and stamped with the registry generation
they were computed under. A read whose stamp does not match the current
generation recomputes and overwrites the entry, so replacing the decorate
function invalidates every node at once without sweeping the cache.

The cache does not watch the document. After structural edits, call
``invalidate`` for the affected nodes (or for everything).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from cachetools import LRUCache

from .document import DocumentAdapter
from .engine import compute_decorations
from .registry import DecorateRegistry, DecorationsList


@dataclass
class CacheEntry:
    """Decorations computed for ``node`` under registry generation ``version``."""

    node: Any
    version: int
    decorations: DecorationsList


class DecorationCache:
    """
    Memoizes ``compute_decorations`` per (node, decorate generation).

    Usage:
        cache = DecorationCache(document, registry)
        cache.get(text)  # computed
        cache.get(text)  # same list instance, from the cache
    """

    def __init__(
        self,
        document: DocumentAdapter,
        registry: DecorateRegistry,
        cache_size: int = 10000,
    ):
        """
        Initialize the cache.

        Args:
            document: Adapter used to resolve paths, ranges and ancestors
            registry: Source of the current decorate function and generation
            cache_size: Maximum number of nodes kept before LRU eviction
        """
        if cache_size < 1:
            raise ValueError(f"cache_size must be at least 1, got {cache_size}")

        self._document = document
        self._registry = registry

        # id(node) -> CacheEntry; the entry keeps the node alive so ids stay unique
        self._entries = LRUCache(maxsize=cache_size)

        self._stats = {
            "gets": 0,
            "cache_hits": 0,
            "computations": 0,
            "invalidations": 0,
        }

    def _lookup(self, node: Any) -> Optional[CacheEntry]:
        entry = self._entries.get(id(node))
        if entry is None or entry.node is not node:
            return None
        return entry

    def get(self, node: Any) -> DecorationsList:
        """
        Return decorations for ``node``, computing them on a miss.

        Hits return the stored list itself; treat it as read-only.
        """
        self._stats["gets"] += 1
        version = self._registry.version

        entry = self._lookup(node)
        if entry is not None and entry.version == version:
            self._stats["cache_hits"] += 1
            return entry.decorations

        logging.debug(f"Decoration cache miss for {node!r} at generation {version}")
        decorations = compute_decorations(
            self._document, node, self._registry.current()
        )
        self._stats["computations"] += 1
        self._entries[id(node)] = CacheEntry(node, version, decorations)
        return decorations

    def is_valid(self, node: Any) -> bool:
        """True when a cached entry for ``node`` matches the current generation."""
        entry = self._lookup(node)
        return entry is not None and entry.version == self._registry.version

    def invalidate(self, node: Any = None) -> int:
        """
        Evict the entry for ``node``, or every entry when ``node`` is None.

        Returns the number of entries removed.
        """
        if node is None:
            removed = len(self._entries)
            self._entries.clear()
        else:
            removed = 1 if self._lookup(node) is not None else 0
            if removed:
                del self._entries[id(node)]

        self._stats["invalidations"] += removed
        logging.debug(f"Invalidated {removed} decoration cache entries")
        return removed

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about cache operations."""
        stats = self._stats.copy()
        stats["cache_size"] = len(self._entries)
        stats["cache_hit_rate"] = (
            stats["cache_hits"] / stats["gets"] if stats["gets"] > 0 else 0
        )
        return stats

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, node: Any) -> bool:
        return self._lookup(node) is not None
