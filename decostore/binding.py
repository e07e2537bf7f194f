"""
Decorations Binding
===================

Consumer side of the store: a binding watches one node's decorations and only
reports a change when the recomputed list differs from the one it already
holds. Equal lists keep the previous instance, so a renderer comparing by
identity does no work.

Usage:
    binding = DecorationsBinding(store, text, on_change=rerender)
    binding.value                      # current decorations
    store.update_decorate_function(f)  # rerender(new_list) only if they changed
    binding.close()
"""

from typing import Any, Callable, Optional

from .errors import ConfigurationError
from .registry import DecorationsList
from .store import DecorationStore
from .util.range_list import is_range_list_equal


class DecorationsBinding:
    """Keeps the latest decorations of ``node`` and reports real changes."""

    def __init__(
        self,
        store: DecorationStore,
        node: Any,
        on_change: Optional[Callable[[DecorationsList], None]] = None,
    ):
        if not isinstance(store, DecorationStore):
            raise ConfigurationError(
                "DecorationsBinding must be given a DecorationStore, "
                f"got {type(store).__name__}"
            )

        self._store = store
        self._node = node
        self._on_change = on_change
        self._value = store.get_decorations(node)
        self._unsubscribe: Optional[Callable[[], None]] = store.subscribe(
            self._handle_change
        )

    @property
    def value(self) -> DecorationsList:
        return self._value

    @property
    def node(self) -> Any:
        return self._node

    @property
    def closed(self) -> bool:
        return self._unsubscribe is None

    def refresh(self) -> bool:
        """Re-read the store; return True when the held list was replaced."""
        decorations = self._store.get_decorations(self._node)
        if is_range_list_equal(self._value, decorations):
            return False

        self._value = decorations
        if self._on_change is not None:
            self._on_change(decorations)
        return True

    def _handle_change(self) -> None:
        self.refresh()

    def close(self) -> None:
        """Stop listening to the store. Safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
