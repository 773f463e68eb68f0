"""
In-process event bus.

Handlers are called synchronously in subscription order with the event
name and a monotonically increasing sequence number. A failing handler
is logged and does not stop delivery to the others.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

STATE_UPDATED = "state.updated"

Handler = Callable[[str, int], None]


class EventBus:
    def __init__(self) -> None:
        self._handlers: list[Handler] = []
        self._sequence = 0
        self._lock = threading.Lock()

    @property
    def sequence(self) -> int:
        return self._sequence

    def subscribe(self, handler: Handler) -> Callable[[], None]:
        """Register a handler; returns a callable that unsubscribes it."""
        with self._lock:
            self._handlers.append(handler)

        def unsubscribe() -> None:
            with self._lock:
                if handler in self._handlers:
                    self._handlers.remove(handler)

        return unsubscribe

    def emit(self, event: str) -> int:
        with self._lock:
            self._sequence += 1
            seq = self._sequence
            handlers = list(self._handlers)

        for handler in handlers:
            try:
                handler(event, seq)
            except Exception:
                logger.exception("Event handler failed for %s", event)
        return seq
