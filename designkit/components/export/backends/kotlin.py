"""
Kotlin backend - Jetpack Compose color objects, typography, dimensions and
a flattened DesignTokens object.
"""

from __future__ import annotations

from designkit.domain.entities import ColorMode, DesignConfig

from ..flatten import (
    code_identifier,
    flatten_tokens,
    js_number,
    kotlin_color,
    parse_number,
    path_identifier,
    quote,
)

IMPORTS = (
    "import androidx.compose.foundation.isSystemInDarkTheme",
    "import androidx.compose.material3.ColorScheme",
    "import androidx.compose.material3.darkColorScheme",
    "import androidx.compose.material3.lightColorScheme",
    "import androidx.compose.runtime.Composable",
    "import androidx.compose.ui.graphics.Color",
    "import androidx.compose.ui.unit.dp",
    "import androidx.compose.ui.unit.sp",
)

OBJECT_COLORS = (
    ("Background", "background"),
    ("Surface", "surface"),
    ("Primary", "primary"),
    ("PrimaryForeground", "primaryForeground"),
    ("Secondary", "secondary"),
    ("Accent", "accent"),
    ("Text", "text"),
    ("TextSecondary", "textSecondary"),
    ("Success", "success"),
    ("Warning", "warning"),
    ("Error", "error"),
    ("Info", "info"),
)

SCHEME_ROLES = (
    ("primary", "Primary"),
    ("secondary", "Secondary"),
    ("background", "Background"),
    ("surface", "Surface"),
    ("error", "Error"),
)


def _color_object(lines: list[str], name: str, colors: ColorMode) -> set[str]:
    """Emit one colors object, returning the member names it defines."""
    defined = set()
    lines.append(f"object {name} {{")
    for member, role in OBJECT_COLORS:
        color = kotlin_color(colors.role(role))
        if color is None:
            lines.append(f"    // {member}: not a hex color")
            continue
        lines.append(f"    val {member} = {color}")
        defined.add(member)
    lines += ["}", ""]
    return defined


def _scheme(lines: list[str], builder: str, owner: str, defined: set[str]) -> None:
    lines.append(f"        {builder}(")
    for arg, member in SCHEME_ROLES:
        if member in defined:
            lines.append(f"            {arg} = {owner}.{member},")
    lines.append("        )")


def _dimension_object(lines: list[str], name: str, values: dict[str, str], unit: str) -> None:
    lines.append(f"object {name} {{")
    for key, value in values.items():
        number = parse_number(value)
        if number is not None:
            lines.append(f"    val {code_identifier(key)} = {js_number(number)}.{unit}")
    lines += ["}", ""]


def render(config: DesignConfig) -> str:
    tokens = config.tokens
    lines = ["// DesignKit — Generated Kotlin Theme", "package com.app.theme", "", *IMPORTS, ""]

    if tokens.colors is not None:
        light = _color_object(lines, "LightColors", tokens.colors.light)
        dark = _color_object(lines, "DarkColors", tokens.colors.dark)
        lines.append("@Composable")
        lines.append("fun appColorScheme(darkTheme: Boolean = isSystemInDarkTheme()): ColorScheme {")
        lines.append("    return if (darkTheme) {")
        _scheme(lines, "darkColorScheme", "DarkColors", dark)
        lines.append("    } else {")
        _scheme(lines, "lightColorScheme", "LightColors", light)
        lines += ["    }", "}", ""]

    if tokens.typography is not None:
        t = tokens.typography
        lines.append("object AppTypography {")
        lines.append(f"    const val HeadingFamily = {quote(t.heading_font)}")
        lines.append(f"    const val BodyFamily = {quote(t.body_font)}")
        if t.mono_font:
            lines.append(f"    const val MonoFamily = {quote(t.mono_font)}")
        for key, step in t.scale.items():
            size = parse_number(step.size)
            if size is not None:
                lines.append(f"    val {code_identifier(key)} = {js_number(size)}.sp")
        lines += ["}", ""]

    if tokens.spacing is not None:
        _dimension_object(lines, "AppSpacing", tokens.spacing.scale, "dp")

    if tokens.radius is not None:
        _dimension_object(lines, "AppRadius", tokens.radius, "dp")

    if tokens.shadows is not None:
        lines.append("object AppShadows {")
        for key, value in tokens.shadows.items():
            lines.append(f"    const val {code_identifier(key)} = {quote(value)}")
        lines += ["}", ""]

    entries = flatten_tokens(tokens)
    if entries:
        lines.append("object DesignTokens {")
        for entry in entries:
            name = path_identifier(entry.segments, capitalize=True)
            color = kotlin_color(entry.value) if entry.is_color else None
            if color is not None:
                lines.append(f"    val {name} = {color}")
            else:
                lines.append(f"    const val {name} = {quote(entry.value)}")
        lines += ["}", ""]

    return "\n".join(lines)
