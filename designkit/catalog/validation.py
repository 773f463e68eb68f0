"""
Catalog integrity checks.

Run once after loading; a catalog with errors must not be served.
"""

from __future__ import annotations

from typing import get_args

from designkit.catalog.categories import get_category
from designkit.catalog.models import Catalog
from designkit.components.placeholders import ValidationError, validate_layer
from designkit.domain.entities import ButtonColorStrategy, StyleItem

BUTTON_STRATEGIES = get_args(ButtonColorStrategy)


def _check_category(category: str, expected_kind: str) -> list[ValidationError]:
    meta = get_category(category)
    if meta is None or meta.kind != expected_kind:
        return [
            ValidationError(
                field=category,
                code="unknown_category",
                message=f"'{category}' is not a {expected_kind} category",
            )
        ]
    return []


def _check_duplicates(category: str, ids: list[str]) -> list[ValidationError]:
    seen: set[str] = set()
    errors: list[ValidationError] = []
    for item_id in ids:
        if item_id in seen:
            errors.append(
                ValidationError(
                    field=f"{category}.{item_id}",
                    code="duplicate_id",
                    message=f"Duplicate item id '{item_id}' in '{category}'",
                )
            )
        seen.add(item_id)
    return errors


def _check_style_item(category: str, item: StyleItem) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for part, state_map in item.data.css.items():
        for state, layer in state_map.layers().items():
            errors.extend(validate_layer(layer, f"{category}.{item.id}.{part}.{state}."))

    strategy = item.data.details.get("colorStrategy")
    if strategy is not None and strategy not in BUTTON_STRATEGIES:
        errors.append(
            ValidationError(
                field=f"{category}.{item.id}.colorStrategy",
                code="invalid_strategy",
                message=f"Unknown color strategy '{strategy}'",
            )
        )
    return errors


def validate_catalog(catalog: Catalog) -> list[ValidationError]:
    """
    Validate catalog integrity.

    Checks category names, duplicate IDs, placeholder tokens and
    composite effects in every style layer.
    """
    errors: list[ValidationError] = []

    for category in ("colors", "typography", "spacing", "radius", "shadows"):
        errors.extend(_check_duplicates(category, catalog.ids(category)))

    for category, items in catalog.components.items():
        errors.extend(_check_category(category, "style"))
        errors.extend(_check_duplicates(category, [item.id for item in items]))
        for item in items:
            errors.extend(_check_style_item(category, item))

    for category, motion_items in catalog.motion.items():
        errors.extend(_check_category(category, "motion"))
        errors.extend(_check_duplicates(category, [item.id for item in motion_items]))

    return errors
