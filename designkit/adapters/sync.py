"""
Debounced persistence of session state.

Bursts of changes collapse into one write after the debounce window. The
snapshot file is always written; an HTTP target, when configured, is
posted the same payload. Failures are logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import threading

import httpx

from designkit.domain.entities import DesignState
from designkit.ports.state_store import SnapshotStorePort

logger = logging.getLogger(__name__)

STATE_PATH = "/api/designkit/state"


class DebouncedSync:
    def __init__(
        self,
        store: SnapshotStorePort,
        *,
        debounce_ms: int = 500,
        server_url: str | None = None,
        client: httpx.Client | None = None,
        timeout_s: float = 5.0,
    ) -> None:
        self.store = store
        self.delay = debounce_ms / 1000
        self.server_url = server_url.rstrip("/") if server_url else None
        self._client = client
        self._timeout = timeout_s
        self._pending: DesignState | None = None
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def __call__(self, state: DesignState) -> None:
        """Session listener entry point."""
        self.schedule(state)

    def schedule(self, state: DesignState) -> None:
        with self._lock:
            self._pending = state
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self.flush)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def flush(self) -> None:
        """Write the latest scheduled state now."""
        with self._lock:
            state, self._pending = self._pending, None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        if state is None:
            return

        self.store.set(state)
        if self.server_url:
            self._post(state)

    def cancel(self) -> None:
        with self._lock:
            self._pending = None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _post(self, state: DesignState) -> None:
        url = f"{self.server_url}{STATE_PATH}"
        try:
            if self._client is not None:
                response = self._client.post(url, json=state.to_wire())
            else:
                response = httpx.post(url, json=state.to_wire(), timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("State sync to %s failed: %s", url, e)
