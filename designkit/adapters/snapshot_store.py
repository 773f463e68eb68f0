"""
Local snapshot and preset files.

The snapshot is a best-effort mirror of session state under the per-user
state directory. Reads return None on any failure and writes never raise;
the in-memory session stays authoritative.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from designkit.domain.entities import DesignState, Preset

logger = logging.getLogger(__name__)

SNAPSHOT_FILE = "state.json"
PRESETS_FILE = "presets.json"

_PRESET_LIST = TypeAdapter(list[Preset])


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    tmp.replace(path)


class FileSnapshotStore:
    """Snapshot of {selections, colorPicks, typeScale} at <state_dir>/state.json."""

    def __init__(self, state_dir: str | Path) -> None:
        self.path = Path(state_dir).expanduser() / SNAPSHOT_FILE

    def get(self) -> DesignState | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
            return DesignState.model_validate_json(raw)
        except FileNotFoundError:
            return None
        except (OSError, ValidationError) as e:
            logger.debug("Unreadable snapshot at %s: %s", self.path, e)
            return None

    def set(self, state: DesignState) -> None:
        try:
            _write_json(self.path, state.to_wire())
        except OSError as e:
            logger.warning("Failed to write snapshot to %s: %s", self.path, e)


class FilePresetStore:
    """Saved presets as a JSON list at <state_dir>/presets.json."""

    def __init__(self, state_dir: str | Path) -> None:
        self.path = Path(state_dir).expanduser() / PRESETS_FILE

    def load_all(self) -> list[Preset]:
        try:
            return _PRESET_LIST.validate_json(self.path.read_bytes())
        except FileNotFoundError:
            return []
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable presets file %s: %s", self.path, e)
            return []

    def save_all(self, presets: list[Preset]) -> None:
        try:
            _write_json(self.path, [p.to_wire() for p in presets])
        except OSError as e:
            logger.warning("Failed to write presets to %s: %s", self.path, e)


class InMemorySnapshotStore:
    """Process-local snapshot, used when no state directory is configured."""

    def __init__(self, state: DesignState | None = None) -> None:
        self._state = state

    def get(self) -> DesignState | None:
        return self._state

    def set(self, state: DesignState) -> None:
        self._state = state.model_copy(deep=True)


class InMemoryPresetStore:
    def __init__(self) -> None:
        self._presets: list[Preset] = []

    def load_all(self) -> list[Preset]:
        return list(self._presets)

    def save_all(self, presets: list[Preset]) -> None:
        self._presets = list(presets)
