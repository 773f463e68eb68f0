"""
Assemble component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from designkit.domain.entities import DesignConfig, DesignState


@dataclass(frozen=True)
class AssembleInput:
    """Input for assembling a DesignConfig from selection state."""

    state: DesignState
    created_at: datetime | None = None


@dataclass(frozen=True)
class AssembleOutput:
    config: DesignConfig
    # Selected IDs that no longer exist in the catalog
    missing: tuple[str, ...] = ()
