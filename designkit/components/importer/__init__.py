"""
Importer component - JSON round-trip back into selection state.
"""

from .component import import_state, merge_overrides, run
from .models import (
    INVALID_JSON,
    MISSING_SELECTIONS,
    ImportInput,
    ImportOutput,
    ImportValidationError,
)

__all__ = [
    "run",
    "import_state",
    "merge_overrides",
    "ImportInput",
    "ImportOutput",
    "ImportValidationError",
    "INVALID_JSON",
    "MISSING_SELECTIONS",
]
