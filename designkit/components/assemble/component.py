"""
Assemble component - Builds the DesignConfig consumed by every exporter.

Foundations become resolved tokens; every other selected category
contributes its catalog item's display name and raw style record.
No token expansion happens here.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from designkit.catalog.categories import CATEGORIES
from designkit.components.colors import resolve_colors
from designkit.components.typography import resolve_typography
from designkit.domain.entities import (
    CatalogItem,
    ColorOverrides,
    ComponentPreference,
    DesignConfig,
    FontPairingItem,
    MotionItem,
    PaletteItem,
    RadiusItem,
    ShadowItem,
    SpacingItem,
    StyleItem,
    TokenSet,
)

from .models import AssembleInput, AssembleOutput
from .ports import CatalogPort

logger = logging.getLogger(__name__)


def _lookup(
    catalog: CatalogPort, selections: dict[str, str], category: str, missing: list[str]
) -> CatalogItem | None:
    item_id = selections.get(category)
    if not item_id:
        return None
    item = catalog.find(category, item_id)
    if item is None:
        logger.debug("Selection %s=%s not found in catalog", category, item_id)
        missing.append(f"{category}:{item_id}")
    return item


def assemble(
    selections: dict[str, str],
    overrides: ColorOverrides,
    type_scale_id: str,
    catalog: CatalogPort,
    created_at: datetime | None = None,
) -> AssembleOutput:
    """
    Assemble the canonical DesignConfig.

    Args:
        selections: category -> selected item ID
        overrides: per-mode color overrides
        type_scale_id: type scale preset ID (unknown IDs use the default preset)
        catalog: source of catalog items
        created_at: timestamp to stamp on the config (defaults to now)

    Returns:
        AssembleOutput with the config and any selected IDs missing from the catalog.
    """
    missing: list[str] = []

    palette = _lookup(catalog, selections, "colors", missing)
    pairing = _lookup(catalog, selections, "typography", missing)
    spacing = _lookup(catalog, selections, "spacing", missing)
    radius = _lookup(catalog, selections, "radius", missing)
    shadows = _lookup(catalog, selections, "shadows", missing)

    tokens = TokenSet(
        colors=resolve_colors(
            overrides, palette.data if isinstance(palette, PaletteItem) else None
        ),
        typography=resolve_typography(
            pairing.data if isinstance(pairing, FontPairingItem) else None, type_scale_id
        ),
        spacing=spacing.data if isinstance(spacing, SpacingItem) else None,
        radius=dict(radius.data) if isinstance(radius, RadiusItem) else None,
        shadows=dict(shadows.data) if isinstance(shadows, ShadowItem) else None,
    )

    preferences: dict[str, ComponentPreference] = {}
    for meta in CATEGORIES:
        if meta.kind not in ("style", "motion"):
            continue
        item = _lookup(catalog, selections, meta.id, missing)
        if isinstance(item, StyleItem):
            preferences[meta.id] = ComponentPreference(id=item.id, name=item.name, style=item.data)
        elif isinstance(item, MotionItem):
            preferences[meta.id] = ComponentPreference(id=item.id, name=item.name, motion=item.data)

    config = DesignConfig(
        created_at=created_at or datetime.now(UTC),
        selections=dict(selections),
        color_picks=None if overrides.is_empty() else overrides.model_copy(deep=True),
        tokens=tokens,
        component_preferences=preferences,
    )
    return AssembleOutput(config=config, missing=tuple(missing))


def run(inp: AssembleInput, catalog: CatalogPort) -> AssembleOutput:
    """
    Assemble a DesignConfig from a DesignState snapshot.

    Args:
        inp: Selection state and optional timestamp
        catalog: Catalog port used to look up selected items

    Returns:
        AssembleOutput with the resolved configuration.
    """
    state = inp.state
    return assemble(
        state.selections,
        state.color_picks,
        state.type_scale,
        catalog,
        created_at=inp.created_at,
    )
