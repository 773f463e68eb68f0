from typing import Protocol

from designkit.domain.entities import DesignState, Preset


class SnapshotStorePort(Protocol):
    def get(self) -> DesignState | None:
        """Return the last persisted state, or None when nothing is readable."""
        ...

    def set(self, state: DesignState) -> None:
        """Persist the state. Must not raise."""
        ...


class PresetStorePort(Protocol):
    def load_all(self) -> list[Preset]:
        """Return saved presets, oldest first."""
        ...

    def save_all(self, presets: list[Preset]) -> None: ...
