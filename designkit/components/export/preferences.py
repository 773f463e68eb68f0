"""
Ordered access to component and motion preferences for the backends.
"""

from __future__ import annotations

import re

from designkit.catalog import CATEGORIES, CategoryMeta
from designkit.domain.entities import ComponentPreference, DesignConfig, MotionRecord, StyleRecord

_KEYFRAMES_NAME = re.compile(r"@keyframes\s+([\w-]+)")


def style_preferences(config: DesignConfig) -> list[tuple[CategoryMeta, ComponentPreference, StyleRecord]]:
    """Selected style records, in catalog category order."""
    found = []
    for meta in CATEGORIES:
        pref = config.component_preferences.get(meta.id)
        if meta.kind == "style" and pref is not None and pref.style is not None:
            found.append((meta, pref, pref.style))
    return found


def motion_preferences(config: DesignConfig) -> list[tuple[CategoryMeta, ComponentPreference, MotionRecord]]:
    """Selected motion records, in catalog category order."""
    found = []
    for meta in CATEGORIES:
        pref = config.component_preferences.get(meta.id)
        if meta.kind == "motion" and pref is not None and pref.motion is not None:
            found.append((meta, pref, pref.motion))
    return found


def keyframes_name(keyframes: str | None) -> str | None:
    if not keyframes:
        return None
    match = _KEYFRAMES_NAME.search(keyframes)
    return match.group(1) if match else None
