"""
Colors component - Layered color resolution.

Each color role resolves independently per mode, in strict precedence:
user override for that mode, then the selected palette's value for that
mode, then a built-in default. Semantic roles use override keys of the
form ``semantic.<name>``.
"""

from __future__ import annotations

import re

from designkit.domain.entities import (
    COLOR_ROLES,
    SEMANTIC_ROLES,
    SHADE_KEYS,
    ColorMode,
    ColorOverrides,
    ColorPaletteData,
    Mode,
)

from .models import (
    ResolveColorsInput,
    ResolveColorsOutput,
    ResolveModeInput,
    ResolveModeOutput,
)

# --- Built-in Defaults ---

DEFAULT_COLORS: dict[str, str] = {
    "background": "#0a0a0a",
    "surface": "#171717",
    "surfaceAlt": "#1a1a1a",
    "border": "#262626",
    "text": "#f5f5f5",
    "textSecondary": "#a3a3a3",
    "textMuted": "#525252",
    "primary": "#3b82f6",
    "primaryForeground": "#ffffff",
    "secondary": "#262626",
    "secondaryForeground": "#f5f5f5",
    "accent": "#8b5cf6",
    "accentForeground": "#ffffff",
}

DEFAULT_SEMANTIC: dict[str, str] = {
    "success": "#22c55e",
    "warning": "#eab308",
    "error": "#ef4444",
    "info": "#3b82f6",
}

SEMANTIC_PREFIX = "semantic."

HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


# --- Hex Helpers ---


def is_hex_color(value: str) -> bool:
    return bool(HEX_COLOR_PATTERN.match(value))


def hex_to_rgb(hex_color: str) -> tuple[int, int, int] | None:
    """
    Convert a hex color to an RGB tuple.

    Accepts #rgb and #rrggbb. Returns None for anything else.
    """
    if not is_hex_color(hex_color):
        return None

    hex_color = hex_color.lstrip("#")

    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)

    return (
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16),
    )


def format_alpha(alpha: float) -> str:
    """Render an alpha value the way a JS number prints (0.2, 0.05, 1)."""
    return f"{alpha:g}"


def rgba(hex_color: str, alpha: float) -> str:
    """
    Express a hex color at the given opacity as ``rgba(r,g,b,a)``.

    Non-hex input is returned unchanged.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    r, g, b = rgb
    return f"rgba({r},{g},{b},{format_alpha(alpha)})"


# --- Resolution ---


def resolve_mode(
    mode: Mode,
    overrides: dict[str, str],
    palette: ColorPaletteData | None = None,
) -> ColorMode:
    """
    Resolve a complete ColorMode for one mode.

    Total: every role is always populated.
    """
    base = palette.mode(mode) if palette is not None else None

    def get(role: str) -> str:
        if role in overrides:
            return overrides[role]
        if base is not None:
            value = base.role(role)
            if value:
                return value
        return DEFAULT_COLORS[role]

    def get_semantic(role: str) -> str:
        key = f"{SEMANTIC_PREFIX}{role}"
        if key in overrides:
            return overrides[key]
        if base is not None:
            value = base.role(role)
            if value:
                return value
        return DEFAULT_SEMANTIC[role]

    values = {role: get(role) for role in COLOR_ROLES}
    values["semantic"] = {role: get_semantic(role) for role in SEMANTIC_ROLES}
    return ColorMode.model_validate(values)


def resolve_colors(
    overrides: ColorOverrides,
    palette: ColorPaletteData | None = None,
) -> ColorPaletteData | None:
    """
    Resolve both modes independently.

    Returns None when there is no palette and no override at all, so that
    "no colors chosen" stays distinct from "defaults".
    """
    if palette is None and overrides.is_empty():
        return None

    return ColorPaletteData(
        light=resolve_mode("light", overrides.light, palette),
        dark=resolve_mode("dark", overrides.dark, palette),
        primary_scale=(
            dict(palette.primary_scale)
            if palette is not None
            else {key: "" for key in SHADE_KEYS}
        ),
    )


def default_color_mode() -> ColorMode:
    """The built-in fallback set, used when nothing has been chosen."""
    return resolve_mode("light", {}, None)


def is_color_key(key: str) -> bool:
    """Whether key names a role that can be overridden."""
    if key.startswith(SEMANTIC_PREFIX):
        return key[len(SEMANTIC_PREFIX) :] in SEMANTIC_ROLES
    return key in COLOR_ROLES


# --- Component Entry Points ---


def run_resolve_mode(inp: ResolveModeInput) -> ResolveModeOutput:
    return ResolveModeOutput(
        mode=inp.mode,
        colors=resolve_mode(inp.mode, inp.overrides, inp.palette),
    )


def run(inp: ResolveColorsInput) -> ResolveColorsOutput:
    """
    Resolve light and dark color sets.

    Args:
        inp: Overrides per mode plus the optional selected palette.

    Returns:
        ResolveColorsOutput with colors, or None when nothing was chosen.
    """
    return ResolveColorsOutput(colors=resolve_colors(inp.overrides, inp.palette))
