"""
Importer component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from designkit.domain.entities import DesignState

INVALID_JSON = "invalid_json"
MISSING_SELECTIONS = "missing_selections"


@dataclass(frozen=True)
class ImportValidationError:
    """Import rejection shown to the user."""

    field: str
    code: str
    message: str


# --- Input/Output Models ---


@dataclass(frozen=True)
class ImportInput:
    raw_text: str
    current: DesignState


@dataclass(frozen=True)
class ImportOutput:
    state: DesignState | None = None
    error: ImportValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
