"""
Importer component - Restore selection state from an exported JSON document.

Import replaces selections wholesale and merges color overrides key by
key. A rejected document leaves the current state untouched: the caller
receives an error and no new state.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from designkit.domain.entities import MODES, ColorOverrides, DesignState

from .models import INVALID_JSON, MISSING_SELECTIONS, ImportInput, ImportOutput, ImportValidationError

logger = logging.getLogger(__name__)


def _string_entries(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if isinstance(v, str)}


def merge_overrides(current: ColorOverrides, imported: Any) -> ColorOverrides:
    """Overlay imported per-mode overrides onto the current ones."""
    if not isinstance(imported, dict):
        return current
    merged = {mode: dict(current.for_mode(mode)) for mode in MODES}
    for mode in MODES:
        merged[mode].update(_string_entries(imported.get(mode)))
    return ColorOverrides(**merged)


def import_state(raw_text: str, current: DesignState) -> ImportOutput:
    """
    Parse an exported DesignConfig and derive the new selection state.

    Args:
        raw_text: File contents as read from disk or the request body
        current: Session state before the import

    Returns:
        ImportOutput with either the new state or a validation error.
    """
    try:
        document = json.loads(raw_text)
    except (json.JSONDecodeError, TypeError, RecursionError):
        logger.info("Import rejected: not valid JSON")
        return ImportOutput(
            error=ImportValidationError("file", INVALID_JSON, "Failed to parse JSON file")
        )

    if not isinstance(document, dict) or not isinstance(document.get("selections"), dict):
        logger.info("Import rejected: no selections object")
        return ImportOutput(
            error=ImportValidationError(
                "selections", MISSING_SELECTIONS, "Invalid config: missing 'selections' object"
            )
        )

    type_scale = document.get("typeScale")
    state = DesignState(
        selections=_string_entries(document["selections"]),
        color_picks=merge_overrides(current.color_picks, document.get("colorPicks")),
        type_scale=type_scale if isinstance(type_scale, str) else current.type_scale,
    )
    return ImportOutput(state=state)


def run(inp: ImportInput) -> ImportOutput:
    return import_state(inp.raw_text, inp.current)
