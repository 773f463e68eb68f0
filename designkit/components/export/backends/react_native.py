"""
React Native backend - a typed theme module of plain constants.
"""

from __future__ import annotations

import math

from designkit.domain.entities import COLOR_ROLES, SEMANTIC_ROLES, ColorMode, DesignConfig

from ..flatten import js_number, parse_number, quote, ts_key


def _color_entries(lines: list[str], colors: ColorMode, indent: str) -> None:
    for role in (*COLOR_ROLES, *SEMANTIC_ROLES):
        lines.append(f"{indent}{role}: {quote(colors.role(role), interpolates=False)},")


def _numbers(values: dict[str, str]) -> list[str]:
    lines = []
    for key, value in values.items():
        number = parse_number(value)
        if number is not None:
            lines.append(f"  {ts_key(key)}: {js_number(number)},")
    return lines


def render(config: DesignConfig) -> str:
    tokens = config.tokens
    lines = ["// DesignKit — Generated React Native Theme", ""]
    sections = []

    if tokens.colors is not None:
        lines += ["export const colors = {", "  light: {"]
        _color_entries(lines, tokens.colors.light, "    ")
        lines += ["  },", "  dark: {"]
        _color_entries(lines, tokens.colors.dark, "    ")
        lines += ["  },", "} as const;", ""]
        sections.append("colors")

    if tokens.typography is not None:
        t = tokens.typography
        lines.append("export const typography = {")
        lines.append(f"  headingFamily: {quote(t.heading_font, interpolates=False)},")
        lines.append(f"  bodyFamily: {quote(t.body_font, interpolates=False)},")
        if t.mono_font:
            lines.append(f"  monoFamily: {quote(t.mono_font, interpolates=False)},")
        lines.append("  scale: {")
        for key, step in t.scale.items():
            size = parse_number(step.size)
            if size is None:
                continue
            line_height = math.floor(size * (parse_number(step.line_height) or 0) + 0.5)
            lines.append(
                f"    {ts_key(key)}: {{ fontSize: {js_number(size)}, "
                f'lineHeight: {line_height}, fontWeight: "{step.weight}" as const }},'
            )
        lines += ["  },", "} as const;", ""]
        sections.append("typography")

    if tokens.spacing is not None:
        lines += ["export const spacing = {", *_numbers(tokens.spacing.scale), "} as const;", ""]
        sections.append("spacing")

    if tokens.radius is not None:
        lines += ["export const radius = {", *_numbers(tokens.radius), "} as const;", ""]
        sections.append("radius")

    if tokens.shadows is not None:
        lines.append("export const shadows = {")
        for key, value in tokens.shadows.items():
            lines.append(f"  {ts_key(key)}: {quote(value, interpolates=False)},")
        lines += ["} as const;", ""]
        sections.append("shadows")

    lines.append("export const theme = {")
    lines += [f"  {name}," for name in sections]
    lines += ["} as const;", ""]

    return "\n".join(lines)
