"""In-process event dispatching with handlers run concurrently."""

from __future__ import annotations

import abc
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


class HandlerAlreadyRegisteredError(Exception):
    """Raised when the same handler is registered twice for one event."""

    def __init__(self, message: str = "handler already registered") -> None:
        super().__init__(message)


@dataclass
class Event:
    """A named event with an arbitrary payload and the time it was created."""

    name: str
    payload: Any = None
    date_time: datetime = field(default_factory=datetime.now)


class EventHandler(abc.ABC):
    """Something that reacts to dispatched events."""

    @abc.abstractmethod
    def handle(self, event: Event) -> None:
        """Process one event."""


class EventDispatcher:
    """Keeps handlers per event name and runs them when an event is dispatched.

    Handlers are compared by identity, so two distinct handler objects are
    always treated as different handlers.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def dispatch(self, event: Event) -> None:
        """Run every handler of the event concurrently and wait for all of them.

        If any handler raises, the first such error (in registration order)
        is re-raised once all handlers have finished.
        """
        handlers = list(self._handlers.get(event.name, ()))
        if not handlers:
            return
        with ThreadPoolExecutor(max_workers=len(handlers)) as pool:
            futures = [pool.submit(handler.handle, event) for handler in handlers]
        for future in futures:
            future.result()

    def register(self, event_name: str, handler: EventHandler) -> None:
        """Add a handler for an event name."""
        if self.has(event_name, handler):
            raise HandlerAlreadyRegisteredError()
        self._handlers.setdefault(event_name, []).append(handler)

    def has(self, event_name: str, handler: EventHandler) -> bool:
        """Tell whether this exact handler is registered for the event name."""
        return any(h is handler for h in self._handlers.get(event_name, ()))

    def remove(self, event_name: str, handler: EventHandler) -> None:
        """Unregister a handler; unknown names or handlers are ignored."""
        handlers = self._handlers.get(event_name)
        if handlers is None:
            return
        position = next((i for i, h in enumerate(handlers) if h is handler), None)
        if position is not None:
            del handlers[position]

    def clear(self) -> None:
        """Forget every registered handler."""
        self._handlers = {}

    def handlers_for(self, event_name: str) -> list[EventHandler]:
        """Return the handlers registered for an event name, in order."""
        return list(self._handlers.get(event_name, ()))