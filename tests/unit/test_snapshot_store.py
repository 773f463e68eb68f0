"""
Unit tests for the snapshot and preset files.
"""

import json
import logging

from designkit.adapters.snapshot_store import (
    FilePresetStore,
    FileSnapshotStore,
    InMemoryPresetStore,
    InMemorySnapshotStore,
)
from designkit.domain.entities import ColorOverrides, DesignState, Preset


def _state() -> DesignState:
    return DesignState(
        selections={"colors": "ocean"},
        color_picks=ColorOverrides(dark={"primary": "#112233"}),
        type_scale="compact",
    )


class TestFileSnapshotStore:
    def test_missing_file(self, tmp_path) -> None:
        assert FileSnapshotStore(tmp_path).get() is None

    def test_round_trip(self, tmp_path) -> None:
        store = FileSnapshotStore(tmp_path / "nested")
        store.set(_state())
        assert store.get() == _state()

    def test_wire_format(self, tmp_path) -> None:
        """The file holds the camelCase {selections, colorPicks, typeScale} object."""
        FileSnapshotStore(tmp_path).set(_state())
        data = json.loads((tmp_path / "state.json").read_text(encoding="utf-8"))
        assert data == {
            "selections": {"colors": "ocean"},
            "colorPicks": {"light": {}, "dark": {"primary": "#112233"}},
            "typeScale": "compact",
        }
        assert not (tmp_path / "state.json.tmp").exists()

    def test_corrupt_file(self, tmp_path) -> None:
        (tmp_path / "state.json").write_text("{oops", encoding="utf-8")
        assert FileSnapshotStore(tmp_path).get() is None

    def test_write_failure_logged(self, tmp_path, caplog) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = FileSnapshotStore(blocker / "sub")
        with caplog.at_level(logging.WARNING):
            store.set(_state())
        assert "Failed to write snapshot" in caplog.text


class TestFilePresetStore:
    def test_round_trip(self, tmp_path) -> None:
        preset = Preset(
            id="preset-1",
            name="One",
            selections={"colors": "ocean"},
            color_picks=ColorOverrides(),
            type_scale="default",
            created_at=1,
        )
        store = FilePresetStore(tmp_path)
        store.save_all([preset])
        assert FilePresetStore(tmp_path).load_all() == [preset]

    def test_missing_and_corrupt(self, tmp_path) -> None:
        store = FilePresetStore(tmp_path)
        assert store.load_all() == []
        (tmp_path / "presets.json").write_text('{"not": "a list"}', encoding="utf-8")
        assert store.load_all() == []


class TestInMemoryStores:
    def test_snapshot_copy(self) -> None:
        store = InMemorySnapshotStore()
        state = _state()
        store.set(state)
        state.selections["colors"] = "forest"
        assert store.get().selections == {"colors": "ocean"}

    def test_presets(self) -> None:
        store = InMemoryPresetStore()
        assert store.load_all() == []
