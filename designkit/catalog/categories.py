"""
Catalog category metadata.

Every selectable category belongs to one group and one kind. The kind
decides which catalog section holds its items and how the assembler
resolves a selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CategoryGroup = Literal["foundations", "components", "content", "structure", "patterns", "motion"]
CategoryKind = Literal["palette", "typography", "spacing", "radius", "shadows", "style", "motion"]


@dataclass(frozen=True)
class CategoryMeta:
    id: str
    label: str
    group: CategoryGroup
    kind: CategoryKind
    description: str = ""
    # CSS class stem for component classes in the CSS export
    css_class: str | None = None
    # Short key used for animation variables in CSS/Tailwind exports
    motion_key: str | None = None


CATEGORY_GROUPS: tuple[tuple[CategoryGroup, str], ...] = (
    ("foundations", "Foundations"),
    ("components", "Components"),
    ("content", "Content"),
    ("structure", "Structure"),
    ("patterns", "UX Patterns"),
    ("motion", "Motion"),
)


def _style(id: str, label: str, group: CategoryGroup, css_class: str, description: str) -> CategoryMeta:
    return CategoryMeta(id, label, group, "style", description, css_class=css_class)


def _motion(id: str, label: str, motion_key: str, description: str) -> CategoryMeta:
    return CategoryMeta(id, label, "motion", "motion", description, motion_key=motion_key)


CATEGORIES: tuple[CategoryMeta, ...] = (
    # Foundations
    CategoryMeta("colors", "Color Palettes", "foundations", "palette", "Full color systems with light and dark modes"),
    CategoryMeta("typography", "Typography", "foundations", "typography", "Font pairings and type scales"),
    CategoryMeta("spacing", "Spacing", "foundations", "spacing", "Spacing scales and density systems"),
    CategoryMeta("radius", "Border Radius", "foundations", "radius", "Corner rounding philosophies"),
    CategoryMeta("shadows", "Shadows", "foundations", "shadows", "Elevation and shadow systems"),
    # Components
    _style("buttons", "Buttons", "components", "dk-btn", "Button styles, shapes, and states"),
    _style("inputs", "Inputs & Forms", "components", "dk-input", "Text inputs, selects, checkboxes, toggles"),
    _style("cards", "Cards", "components", "dk-card", "Content container styles"),
    # Content
    _style("badges", "Badges & Chips", "content", "dk-badge", "Labels, tags, and status indicators"),
    _style("avatars", "Avatars", "content", "dk-avatar", "User image and initials styles"),
    _style("lists", "Lists", "content", "dk-list", "List item layouts and styles"),
    _style("tables", "Tables", "content", "dk-table", "Data table styles"),
    _style("pricing", "Pricing", "content", "dk-pricing", "Pricing card and table layouts"),
    _style("testimonials", "Testimonials", "content", "dk-testimonial", "Quote and review styles"),
    _style("stats", "Stats & Metrics", "content", "dk-stat", "Number displays and indicators"),
    _style("dividers", "Dividers", "content", "dk-divider", "Separators and visual breaks"),
    _style("images", "Image Treatments", "content", "dk-image", "Photo framing and overlay styles"),
    # Structure
    _style("navigation", "Navigation Bars", "structure", "dk-nav", "Top bars and mobile bottom tabs"),
    _style("tabs", "Tabs", "structure", "dk-tabs", "Tab navigation styles"),
    _style("sidebars", "Sidebars", "structure", "dk-sidebar", "Side navigation panels"),
    _style("modals", "Modals & Sheets", "structure", "dk-modal", "Overlays, dialogs, drawers"),
    _style("heroes", "Hero Sections", "structure", "dk-hero", "Landing page header layouts"),
    _style("footers", "Footers", "structure", "dk-footer", "Page footer layouts"),
    # UX Patterns
    _style("empty-states", "Empty States", "patterns", "dk-empty-state", "Blank screen designs"),
    _style("loading", "Loading", "patterns", "dk-loading", "Skeletons, spinners, progress"),
    _style("onboarding", "Onboarding", "patterns", "dk-onboarding", "First-run and tutorial flows"),
    _style("errors", "Error Screens", "patterns", "dk-error", "404, connection, and failure states"),
    _style("success", "Success States", "patterns", "dk-success", "Confirmation and completion"),
    _style("notifications", "Notifications", "patterns", "dk-notification", "Toasts, banners, alerts"),
    # Motion
    _motion("button-animations", "Button Press", "button", "Click and tap feedback"),
    _motion("hover-animations", "Hover Effects", "hover", "Mouse-over interactions"),
    _motion("page-transitions", "Page Transitions", "page-transition", "Screen-to-screen motion"),
    _motion("micro-interactions", "Micro-interactions", "micro-interaction", "Toggle, check, like animations"),
    _motion("entrance-animations", "Entrance Animations", "entrance", "How elements appear on screen"),
)

_BY_ID = {meta.id: meta for meta in CATEGORIES}


def get_category(category_id: str) -> CategoryMeta | None:
    return _BY_ID.get(category_id)


def categories_by_group(group: CategoryGroup) -> list[CategoryMeta]:
    return [meta for meta in CATEGORIES if meta.group == group]


def categories_of_kind(kind: CategoryKind) -> list[CategoryMeta]:
    return [meta for meta in CATEGORIES if meta.kind == kind]


def is_known_category(category_id: str) -> bool:
    return category_id in _BY_ID
