"""Synchronous event bus used as the reporting sink for apply passes."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe dispatcher for apply events.

    Listeners subscribe to one event class, or to everything via
    :meth:`on_all`.  ``emit`` calls catch-all listeners first, then the
    listeners for the exact event class, each in registration order.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Call *callback* for every event of exactly *event_type*."""
        self._by_type.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Listener) -> None:
        self._catch_all.append(callback)

    def emit(self, event: Any) -> None:
        for cb in self._catch_all:
            cb(event)
        for cb in self._by_type.get(type(event), ()):
            cb(event)


class EventRecorder:
    """Listener that keeps every event it receives, in order."""

    def __init__(self, bus: EventBus | None = None) -> None:
        self.events: list[Any] = []
        if bus is not None:
            bus.on_all(self)

    def __call__(self, event: Any) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[Any]:
        return [e for e in self.events if isinstance(e, event_type)]
