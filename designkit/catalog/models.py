"""
Catalog model.

Static catalog data, loaded once at startup and never mutated.
"""

from __future__ import annotations

import random

from pydantic import BaseModel, Field

from designkit.catalog.categories import get_category
from designkit.domain.entities import (
    CatalogItem,
    FontPairingItem,
    MotionItem,
    PaletteItem,
    RadiusItem,
    ShadowItem,
    SpacingItem,
    StyleItem,
)


class Catalog(BaseModel):
    colors: list[PaletteItem] = Field(default_factory=list)
    typography: list[FontPairingItem] = Field(default_factory=list)
    spacing: list[SpacingItem] = Field(default_factory=list)
    radius: list[RadiusItem] = Field(default_factory=list)
    shadows: list[ShadowItem] = Field(default_factory=list)
    # category id -> items
    components: dict[str, list[StyleItem]] = Field(default_factory=dict)
    motion: dict[str, list[MotionItem]] = Field(default_factory=dict)

    def items(self, category: str) -> list[CatalogItem]:
        """All items of a category, empty for unknown categories."""
        meta = get_category(category)
        if meta is None:
            return []
        if meta.kind == "palette":
            return list(self.colors)
        if meta.kind == "typography":
            return list(self.typography)
        if meta.kind == "spacing":
            return list(self.spacing)
        if meta.kind == "radius":
            return list(self.radius)
        if meta.kind == "shadows":
            return list(self.shadows)
        if meta.kind == "style":
            return list(self.components.get(category, []))
        return list(self.motion.get(category, []))

    def find(self, category: str, item_id: str) -> CatalogItem | None:
        for item in self.items(category):
            if item.id == item_id:
                return item
        return None

    def ids(self, category: str) -> list[str]:
        return [item.id for item in self.items(category)]

    def categories(self) -> list[str]:
        """Categories that have at least one item."""
        found = []
        for name in ("colors", "typography", "spacing", "radius", "shadows"):
            if getattr(self, name):
                found.append(name)
        found.extend(category for category, items in self.components.items() if items)
        found.extend(category for category, items in self.motion.items() if items)
        return found

    def random_id(self, category: str, rng: random.Random | None = None) -> str | None:
        ids = self.ids(category)
        if not ids:
            return None
        return (rng or random).choice(ids)
