"""
Assemble component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from designkit.domain.entities import CatalogItem


class CatalogPort(Protocol):
    """Read-only access to catalog items."""

    def find(self, category: str, item_id: str) -> CatalogItem | None:
        """Find an item by category and ID; None if it does not exist."""
        ...
