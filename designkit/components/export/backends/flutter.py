"""
Flutter backend - Material ColorSchemes, a TextTheme and dimension classes.
"""

from __future__ import annotations

from designkit.domain.entities import ColorMode, DesignConfig

from ..flatten import argb_literal, code_identifier, js_number, parse_number, quote

TEXT_THEME_SLOTS = {
    "h1": "displayLarge",
    "h2": "displayMedium",
    "h3": "displaySmall",
    "h4": "headlineMedium",
    "h5": "titleLarge",
    "h6": "titleMedium",
    "body": "bodyLarge",
    "bodySmall": "bodyMedium",
    "caption": "bodySmall",
    "button": "labelLarge",
}

SCHEME_ROLES = (
    ("primary", "primary"),
    ("secondary", "secondary"),
    ("surface", "surface"),
    ("error", "error"),
    ("onPrimary", "primaryForeground"),
    ("onSecondary", "secondaryForeground"),
    ("onSurface", "text"),
)


def _scheme(lines: list[str], name: str, factory: str, colors: ColorMode) -> None:
    lines.append(f"  static const {name} = ColorScheme.{factory}(")
    for arg, role in SCHEME_ROLES:
        literal = argb_literal(colors.role(role))
        if literal is not None:
            lines.append(f"    {arg}: Color({literal}),")
    lines.append("  );")


def _double_class(lines: list[str], name: str, values: dict[str, str]) -> None:
    lines.append(f"class {name} {{")
    for key, value in values.items():
        number = parse_number(value)
        if number is not None:
            lines.append(f"  static const double {code_identifier(key)} = {js_number(number)};")
    lines += ["}", ""]


def render(config: DesignConfig) -> str:
    tokens = config.tokens
    lines = [
        "// DesignKit — Generated Flutter Theme",
        "import 'package:flutter/material.dart';",
        "",
    ]

    if tokens.colors is not None:
        lines.append("class AppColors {")
        _scheme(lines, "lightScheme", "light", tokens.colors.light)
        lines.append("")
        _scheme(lines, "darkScheme", "dark", tokens.colors.dark)
        lines += ["}", ""]

    if tokens.typography is not None:
        t = tokens.typography
        lines.append("class AppTypography {")
        lines.append(f"  static const headingFamily = {quote(t.heading_font)};")
        lines.append(f"  static const bodyFamily = {quote(t.body_font)};")
        if t.mono_font:
            lines.append(f"  static const monoFamily = {quote(t.mono_font)};")
        lines.append("")
        lines.append("  static final textTheme = TextTheme(")
        for key, step in t.scale.items():
            slot = TEXT_THEME_SLOTS.get(key)
            size = parse_number(step.size)
            if slot is None or size is None:
                continue
            family = "headingFamily" if key.startswith("h") else "bodyFamily"
            style = f"fontFamily: {family}, fontSize: {js_number(size)}, fontWeight: FontWeight.w{step.weight}"
            height = parse_number(step.line_height)
            if height is not None:
                style += f", height: {js_number(height)}"
            lines.append(f"    {slot}: TextStyle({style}),")
        lines += ["  );", "}", ""]

    if tokens.spacing is not None:
        _double_class(lines, "AppSpacing", tokens.spacing.scale)

    if tokens.radius is not None:
        _double_class(lines, "AppRadius", tokens.radius)

    if tokens.shadows is not None:
        lines.append("class AppShadows {")
        for key, value in tokens.shadows.items():
            lines.append(f"  static const {code_identifier(key)} = {quote(value)};")
        lines += ["}", ""]

    for fn, scheme in (("lightTheme", "lightScheme"), ("darkTheme", "darkScheme")):
        lines.append(f"ThemeData {fn}() => ThemeData(")
        if tokens.colors is not None:
            lines.append(f"  colorScheme: AppColors.{scheme},")
        if tokens.typography is not None:
            lines.append("  textTheme: AppTypography.textTheme,")
        lines += [");", ""]

    return "\n".join(lines)
