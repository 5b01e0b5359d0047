"""Minimal change-notification base class for reactive dashboard state."""

import logging
from typing import Any, Callable, List, Tuple

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Any], None]

_MISSING = object()


class Observable:
    """
    Notifies subscribers when an observed attribute is set to a new object.

    Subclasses list the attribute names to watch in ``observed_fields``.
    Subscribers are called as ``callback(field_name, new_value)``. In-place
    mutation of a list or dict does not notify; reassign the attribute.
    """

    observed_fields: Tuple[str, ...] = ()

    def __init__(self):
        object.__setattr__(self, "_subscribers", [])

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change callback. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def __setattr__(self, name: str, value: Any):
        previous = getattr(self, name, _MISSING)
        object.__setattr__(self, name, value)
        if name in self.observed_fields and (previous is _MISSING or previous is not value):
            self._notify(name, value)

    def _notify(self, name: str, value: Any):
        subscribers: List[Subscriber] = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(name, value)
            except Exception as e:
                logger.error(f"Subscriber {callback!r} failed on '{name}' change: {e}")
