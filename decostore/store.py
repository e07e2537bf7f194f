"""
Decostore Store - Cached, Subscribable Decorations
==================================================

``DecorationStore`` ties together the registry of the active decorate
function, the per-node decoration cache and the listener set. One store is
bound to one document and handed explicitly to every consumer.

Data flows one way:

    update_decorate_function(fn)
        -> registry generation moves on
        -> every listener is called, in subscription order
        -> consumers call get_decorations(node)
        -> the cache misses and recomputes against the new function

Basic Usage
-----------

```python
from decostore import Document, Node, Point, Range, create_store

root = Node(type="root")
text = root.add_child(Node(text="0123456789"))
doc = Document(root)

def highlight(entry):
    node, path = entry
    if node is text:
        return [Range(Point(path, 3), Point(path, 7))]
    return []

store = create_store(doc, highlight)
store.get_decorations(text)   # [Range(Point((0,), 3), Point((0,), 7))]

unsubscribe = store.subscribe(lambda: print("decorate changed"))
store.update_decorate_function(lambda entry: [])   # prints once
unsubscribe()
```

Document edits are not tracked. After changing the tree structure call
``invalidate()`` (or ``invalidate(node)``) before consumers read again.
"""

import logging
from typing import Any, Dict

from .cache import DecorationCache
from .document import DocumentAdapter
from .registry import Decorate, DecorateRegistry, DecorationsList
from .util.listener_set import Listener, ListenerSet, Unsubscribe


class DecorationStore:
    """
    Store of decorations for the nodes of one document.

    Construction registers the initial decorate function without notifying
    anyone. Every later ``update_decorate_function`` with a different function
    notifies all listeners exactly once.
    """

    def __init__(
        self,
        document: DocumentAdapter,
        decorate: Decorate,
        cache_size: int = 10000,
    ):
        """
        Initialize the store.

        Args:
            document: Document model adapter the store is bound to
            decorate: Initial decorate function
            cache_size: Maximum number of nodes whose decorations are cached
        """
        self._document = document
        self._registry = DecorateRegistry(decorate)
        self._cache = DecorationCache(document, self._registry, cache_size=cache_size)
        self._listeners = ListenerSet()
        self._notifications = 0

    @property
    def document(self) -> DocumentAdapter:
        return self._document

    @property
    def decorate(self) -> Decorate:
        """The decorate function currently in effect."""
        return self._registry.current()

    @property
    def version(self) -> int:
        """Generation of the current decorate function, 0 for the initial one."""
        return self._registry.version

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """
        Call ``listener()`` whenever the decorate function is replaced.

        Returns a function that removes the listener; calling it again is a
        no-op.
        """
        return self._listeners.subscribe(listener)

    def get_decorations(self, node: Any) -> DecorationsList:
        """
        Decorations for ``node``, from the cache when still valid.

        The returned list is the cached instance shared by every later read
        until the entry is invalidated. Callers must not mutate it.
        """
        return self._cache.get(node)

    def update_decorate_function(self, decorate: Decorate) -> bool:
        """
        Replace the decorate function and notify listeners.

        Passing the function that is already current does nothing and returns
        False.
        """
        if not self._registry.replace(decorate):
            return False

        self._notifications += 1
        called = self._listeners.notify_all()
        logging.debug(f"Notified {called} decoration listeners")
        return True

    def invalidate(self, node: Any = None) -> int:
        """Drop cached decorations for ``node``, or for every node."""
        return self._cache.invalidate(node)

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about store operations."""
        stats = self._cache.get_stats()
        stats["notifications"] = self._notifications
        stats["listeners"] = len(self._listeners)
        stats["version"] = self._registry.version
        return stats


def create_store(
    document: DocumentAdapter,
    decorate: Decorate,
    cache_size: int = 10000,
) -> DecorationStore:
    """
    Create a decoration store with specified settings.

    Args:
        document: Document model adapter the store is bound to
        decorate: Initial decorate function
        cache_size: Size of the per-node LRU cache

    Returns:
        Configured DecorationStore instance
    """
    return DecorationStore(document, decorate, cache_size=cache_size)
