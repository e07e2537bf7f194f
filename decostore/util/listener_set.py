"""
Listener Set
============

This module provides ListenerSet, the ordered set of change listeners behind
``DecorationStore.subscribe``.

Notification rounds work on a snapshot of the registrations taken when the
round starts:

- listeners subscribed during a round wait for the next round
- listeners unsubscribed during a round are skipped if their turn has not
  come yet
- listener exceptions propagate and end the round
"""

from typing import Callable, Dict, List

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class _Registration:
    """One subscription of one listener; identity distinguishes re-subscriptions."""

    __slots__ = ("listener",)

    def __init__(self, listener: Listener):
        self.listener = listener


class ListenerSet:
    """
    Ordered, duplicate-free set of zero-argument callbacks.

    Listeners are compared by identity, never by ``__eq__`` or ``__hash__``.
    Registration order is notification order. Subscribing a listener that is
    already registered keeps the original registration and position.
    """

    __slots__ = ("_registrations",)

    def __init__(self):
        # id(listener) -> registration; the registration keeps the listener alive
        self._registrations: Dict[int, _Registration] = {}

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """
        Register ``listener`` and return a function that removes it.

        The returned function only ever removes the registration it was
        created for, so a stale handle cannot drop a later re-subscription.
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")
        key = id(listener)
        registration = self._registrations.get(key)
        if registration is None:
            registration = _Registration(listener)
            self._registrations[key] = registration

        def unsubscribe() -> None:
            if self._registrations.get(key) is registration:
                del self._registrations[key]

        return unsubscribe

    def _is_current(self, registration: _Registration) -> bool:
        return self._registrations.get(id(registration.listener)) is registration

    def notify_all(self) -> int:
        """Invoke every listener of the current snapshot once; return how many ran."""
        snapshot: List[_Registration] = list(self._registrations.values())
        called = 0
        for registration in snapshot:
            if not self._is_current(registration):
                continue
            registration.listener()
            called += 1
        return called

    def clear(self) -> None:
        self._registrations.clear()

    def __contains__(self, listener: Listener) -> bool:
        registration = self._registrations.get(id(listener))
        return registration is not None and registration.listener is listener

    def __len__(self) -> int:
        return len(self._registrations)
