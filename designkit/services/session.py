"""
Design session - the single owned holder of selection state.

All mutations go through Session methods. Every change that alters the
design state is recorded for undo, clears the redo stack and notifies
listeners. Undo and redo themselves notify but are not recorded.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Callable

from designkit.adapters.clock import SystemClock
from designkit.adapters.snapshot_store import InMemoryPresetStore
from designkit.catalog import Catalog, is_known_category
from designkit.components.assemble import assemble
from designkit.components.colors import is_color_key, is_hex_color
from designkit.components.importer import ImportValidationError, import_state
from designkit.domain.entities import MODES, ColorOverrides, DesignConfig, DesignState, Mode, Preset
from designkit.ports.clock import ClockPort
from designkit.ports.state_store import PresetStorePort

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50

Listener = Callable[[DesignState], None]


class Session:
    def __init__(
        self,
        catalog: Catalog,
        presets: PresetStorePort | None = None,
        *,
        clock: ClockPort | None = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        rng: random.Random | None = None,
        state: DesignState | None = None,
    ) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        self.catalog = catalog
        self.preset_store = presets or InMemoryPresetStore()
        self.clock = clock or SystemClock()
        self.rng = rng or random.Random()
        self._state = state.model_copy(deep=True) if state else DesignState()
        self._undo: deque[DesignState] = deque(maxlen=history_limit)
        self._redo: list[DesignState] = []
        self._locked: set[str] = set()
        self._listeners: list[Listener] = []
        self._presets: list[Preset] = self.preset_store.load_all()

    # --- State access ---

    @property
    def state(self) -> DesignState:
        return self._state.model_copy(deep=True)

    @property
    def selections(self) -> dict[str, str]:
        return dict(self._state.selections)

    def snapshot(self) -> DesignState:
        """Current {selections, colorPicks, typeScale} for persistence."""
        return self.state

    def config(self) -> DesignConfig:
        """Assemble the current state into a DesignConfig."""
        s = self._state
        return assemble(s.selections, s.color_picks, s.type_scale, self.catalog).config

    def is_selected(self, category: str, item_id: str) -> bool:
        return self._state.selections.get(category) == item_id

    # --- Listeners ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    def _commit(self, new_state: DesignState, action: str) -> bool:
        if new_state == self._state:
            return False
        self._undo.append(self._state)
        self._redo.clear()
        self._state = new_state
        logger.debug("Session %s", action)
        self._notify()
        return True

    def _with(self, **changes) -> DesignState:
        return self._state.model_copy(update=changes, deep=True)

    # --- Selections ---

    def select(self, category: str, item_id: str) -> None:
        _require_category(category)
        self._commit(self._with(selections={**self._state.selections, category: item_id}), "select")

    def deselect(self, category: str) -> None:
        selections = dict(self._state.selections)
        selections.pop(category, None)
        self._commit(self._with(selections=selections), "deselect")

    def reset_category(self, category: str) -> None:
        self.deselect(category)

    def reset_all(self) -> None:
        self._commit(self._with(selections={}, color_picks=ColorOverrides()), "reset_all")

    # --- Color picks ---

    def pick_color(self, mode: Mode, key: str, value: str) -> None:
        """
        Override one color role in one mode.

        Raises:
            ValueError: Unknown mode or role, or a value that is not a hex color
        """
        _require_mode(mode)
        if not is_color_key(key):
            raise ValueError(f"Unknown color role: {key}")
        if not is_hex_color(value):
            raise ValueError(f"Invalid hex color: {value}")
        picks = self._state.color_picks
        updated = {**picks.for_mode(mode), key: value}
        self._commit(
            self._with(color_picks=picks.model_copy(update={mode: updated})),
            "pick_color",
        )

    def unpick_color(self, mode: Mode, key: str) -> None:
        _require_mode(mode)
        picks = self._state.color_picks
        updated = {k: v for k, v in picks.for_mode(mode).items() if k != key}
        self._commit(
            self._with(color_picks=picks.model_copy(update={mode: updated})),
            "unpick_color",
        )

    def reset_color_picks(self) -> None:
        """Clear every override together with the palette selection."""
        selections = {k: v for k, v in self._state.selections.items() if k != "colors"}
        self._commit(
            self._with(selections=selections, color_picks=ColorOverrides()),
            "reset_color_picks",
        )

    def set_type_scale(self, scale_id: str) -> None:
        self._commit(self._with(type_scale=scale_id), "set_type_scale")

    # --- Lock / randomize ---

    @property
    def locked(self) -> frozenset[str]:
        return frozenset(self._locked)

    def toggle_lock(self, category: str) -> bool:
        """Flip the lock on a category; returns the new lock state."""
        _require_category(category)
        if category in self._locked:
            self._locked.discard(category)
            return False
        self._locked.add(category)
        return True

    def randomize_all(self) -> None:
        selections = dict(self._state.selections)
        for category in self.catalog.categories():
            if category in self._locked:
                continue
            item_id = self.catalog.random_id(category, self.rng)
            if item_id:
                selections[category] = item_id
        self._commit(self._with(selections=selections), "randomize_all")

    def randomize_category(self, category: str) -> None:
        _require_category(category)
        item_id = self.catalog.random_id(category, self.rng)
        if item_id is None:
            return
        self._commit(
            self._with(selections={**self._state.selections, category: item_id}),
            "randomize_category",
        )

    # --- Presets ---

    @property
    def presets(self) -> list[Preset]:
        return list(self._presets)

    def save_preset(self, name: str) -> Preset:
        now_ms = int(self.clock.now_utc().timestamp() * 1000)
        preset_id = f"preset-{now_ms}"
        taken = {p.id for p in self._presets}
        suffix = 1
        while preset_id in taken:
            suffix += 1
            preset_id = f"preset-{now_ms}-{suffix}"

        s = self.state
        preset = Preset(
            id=preset_id,
            name=name,
            selections=s.selections,
            color_picks=s.color_picks,
            type_scale=s.type_scale,
            created_at=now_ms,
        )
        self._presets.append(preset)
        self.preset_store.save_all(self._presets)
        return preset

    def load_preset(self, preset_id: str) -> bool:
        preset = self._find_preset(preset_id)
        if preset is None:
            return False
        self._commit(
            DesignState(
                selections=dict(preset.selections),
                color_picks=preset.color_picks.model_copy(deep=True),
                type_scale=preset.type_scale,
            ),
            "load_preset",
        )
        return True

    def delete_preset(self, preset_id: str) -> bool:
        remaining = [p for p in self._presets if p.id != preset_id]
        if len(remaining) == len(self._presets):
            return False
        self._presets = remaining
        self.preset_store.save_all(self._presets)
        return True

    def rename_preset(self, preset_id: str, name: str) -> bool:
        preset = self._find_preset(preset_id)
        if preset is None:
            return False
        self._presets = [
            p.model_copy(update={"name": name}) if p.id == preset_id else p for p in self._presets
        ]
        self.preset_store.save_all(self._presets)
        return True

    def _find_preset(self, preset_id: str) -> Preset | None:
        return next((p for p in self._presets if p.id == preset_id), None)

    # --- Undo / redo ---

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self._state)
        self._state = self._undo.pop()
        self._notify()
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self._state)
        self._state = self._redo.pop()
        self._notify()
        return True

    # --- Import ---

    def import_json(self, raw_text: str) -> ImportValidationError | None:
        """
        Replace the state from an exported JSON document.

        Returns the validation error on rejection; the state is untouched.
        """
        result = import_state(raw_text, self._state)
        if result.error is not None:
            return result.error
        self._commit(result.state, "import_json")
        return None


def _require_category(category: str) -> None:
    if not is_known_category(category):
        raise ValueError(f"Unknown category: {category}")


def _require_mode(mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown color mode: {mode}")
