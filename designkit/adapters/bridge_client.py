"""
HTTP bridge client for agents and the CLI.

Every operation is read-only and returns text. Transport failures fall
back to the local snapshot file and then to a fixed "nothing available"
message; no exception reaches the caller.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx

from designkit.components.export import BRIDGE_FORMATS
from designkit.ports.state_store import SnapshotStorePort

logger = logging.getLogger(__name__)

CONFIG_PATH = "/api/designkit/config"
STATE_PATH = "/api/designkit/state"
EXPORT_PATH = "/api/designkit/export/{format}"

NO_STATE = "No DesignKit state available. Run 'designkit serve' and make some selections first."
NO_COLORS_SELECTED = "No color palette selected in DesignKit."
NO_COLOR_DATA = "No color data available."
NO_TYPOGRAPHY_SELECTED = "No typography selected in DesignKit."
NO_TYPOGRAPHY = "Could not fetch typography. Is the server running?"
NO_SELECTIONS = "No selections available."


class BridgeError(Exception):
    """Raised internally when the server cannot serve a request."""


def get_nested_value(obj: Any, path: str) -> Any:
    """
    Walk a dot-separated path through nested dicts.

    Returns None when any segment is missing or a non-dict is reached.
    """
    current = obj
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


class BridgeClient:
    def __init__(
        self,
        base_url: str,
        snapshots: SnapshotStorePort,
        *,
        client: httpx.Client | None = None,
        timeout_s: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.snapshots = snapshots
        self._client = client or httpx.Client(timeout=timeout_s)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BridgeClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Transport ---

    def _fetch(self, path: str) -> Any:
        """GET a path; JSON bodies are decoded, anything else returned as text."""
        url = f"{self.base_url}{path}"
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise BridgeError(f"Server unreachable at {self.base_url}. Is 'designkit serve' running?") from e

        if response.is_error:
            raise BridgeError(f"HTTP {response.status_code}: {response.text}")

        if "application/json" in response.headers.get("content-type", ""):
            try:
                return response.json()
            except ValueError as e:
                raise BridgeError(f"Malformed JSON from {url}") from e
        return response.text

    def _disk_state(self) -> dict[str, Any] | None:
        state = self.snapshots.get()
        return state.to_wire() if state is not None else None

    # --- Operations ---

    def get_config(self) -> str:
        try:
            return _dump(self._fetch(CONFIG_PATH))
        except BridgeError as e:
            logger.info("Config fetch failed, using disk snapshot: %s", e)
        state = self._disk_state()
        if state is not None:
            return f"[Fallback: raw state from disk — server not reachable]\n\n{_dump(state)}"
        return NO_STATE

    def get_colors(self) -> str:
        try:
            config = self._fetch(CONFIG_PATH)
        except BridgeError as e:
            logger.info("Colors fetch failed, using disk snapshot: %s", e)
            state = self._disk_state()
            if state is not None and state.get("colorPicks"):
                return f"[Fallback: raw color picks from disk]\n\n{_dump(state['colorPicks'])}"
            return NO_COLOR_DATA

        colors = get_nested_value(config, "tokens.colors")
        if not colors:
            return NO_COLORS_SELECTED
        return _dump(colors)

    def get_typography(self) -> str:
        try:
            config = self._fetch(CONFIG_PATH)
        except BridgeError as e:
            logger.info("Typography fetch failed: %s", e)
            return NO_TYPOGRAPHY

        typography = get_nested_value(config, "tokens.typography")
        if not typography:
            return NO_TYPOGRAPHY_SELECTED
        return _dump(typography)

    def get_selections(self) -> str:
        try:
            return _dump(self._fetch(STATE_PATH))
        except BridgeError as e:
            logger.info("State fetch failed, using disk snapshot: %s", e)
        state = self._disk_state()
        if state is not None:
            return f"[Fallback: disk state]\n\n{_dump(state)}"
        return NO_SELECTIONS

    def get_export(self, format_id: str) -> str:
        if format_id not in BRIDGE_FORMATS:
            return (
                f'Could not export format "{format_id}". '
                f"Supported formats: {', '.join(BRIDGE_FORMATS)}."
            )
        try:
            body = self._fetch(EXPORT_PATH.format(format=format_id))
        except BridgeError as e:
            return f'Could not export format "{format_id}". {e}'
        return body if isinstance(body, str) else _dump(body)

    def get_token(self, path: str) -> str:
        try:
            config = self._fetch(CONFIG_PATH)
        except BridgeError as e:
            return f"Could not fetch token. {e}"

        tokens = config.get("tokens") if isinstance(config, dict) else None
        value = get_nested_value(tokens, path)
        if value is None:
            keys = ", ".join(tokens) if isinstance(tokens, dict) and tokens else "none"
            return f'Token "{path}" not found. Available top-level keys: {keys}'
        if isinstance(value, (dict, list)):
            return _dump(value)
        return str(value)

    def tools(self) -> dict[str, Callable[..., str]]:
        """Operation name -> callable, as exposed on the CLI."""
        return {
            "config": self.get_config,
            "colors": self.get_colors,
            "typography": self.get_typography,
            "selections": self.get_selections,
            "export": self.get_export,
            "token": self.get_token,
        }
