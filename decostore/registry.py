"""
Decorate Registry
=================

Holds the one decorate function that is current for a store, plus a
generation counter. Every effective replacement bumps the counter; cached
decorations remember the generation they were computed under and are stale as
soon as it moves on.
"""

import logging
from typing import Any, Callable, List, Tuple

from .ranges import Path, Range

DecorationsList = List[Range]
Decorate = Callable[[Tuple[Any, Path]], DecorationsList]


class DecorateRegistry:
    """Single-slot registry for the active decorate function."""

    __slots__ = ("_decorate", "_version")

    def __init__(self, decorate: Decorate):
        if not callable(decorate):
            raise TypeError(
                f"Decorate function must be callable, got {type(decorate).__name__}"
            )
        # Initial registration is generation 0 and is not a replacement.
        self._decorate = decorate
        self._version = 0

    def current(self) -> Decorate:
        return self._decorate

    @property
    def version(self) -> int:
        return self._version

    def replace(self, decorate: Decorate) -> bool:
        """
        Swap in ``decorate``.

        Returns True when the function actually changed, False when
        ``decorate`` is the function already current.
        """
        if not callable(decorate):
            raise TypeError(
                f"Decorate function must be callable, got {type(decorate).__name__}"
            )
        if decorate is self._decorate:
            return False

        self._decorate = decorate
        self._version += 1
        logging.debug(f"Decorate function replaced, generation {self._version}")
        return True
