"""
CLAUDE.md backend - design rules in prose for an AI coding agent.

The document is for reading, not for round-tripping. Component CSS is
shown raw, token expressions included, so the agent sees which values
follow the palette.
"""

from __future__ import annotations

from typing import Any

from designkit.domain.entities import CSSStateMap, DesignConfig

from ..flatten import camel_to_kebab
from ..preferences import motion_preferences, style_preferences

STRATEGY_SUMMARIES = {
    "solid": "bg=primary, text=primaryForeground",
    "outline": "bg=transparent, text=primary, border=primary",
    "ghost": "bg=transparent, text=primary",
    "soft": "bg=primary@10%, text=primary",
    "surface": "bg=surface, text=text, border=border",
    "gradient": "bg=primary->accent, text=primaryForeground",
}


def humanize(key: str) -> str:
    """supportsIcons -> Supports icons"""
    return camel_to_kebab(key).replace("-", " ").capitalize()


def _detail_line(key: str, value: Any) -> str:
    if key == "colorStrategy":
        summary = STRATEGY_SUMMARIES.get(str(value), str(value))
        return f"- Color strategy: {value} ({summary})"
    if key == "supportsSizes":
        return f"- Supports sizes: {'sm, md, lg' if value else 'no'}"
    if isinstance(value, bool):
        return f"- {humanize(key)}: {'yes' if value else 'no'}"
    return f"- {humanize(key)}: {value}"


def _css_block(lines: list[str], part: str, state_map: CSSStateMap) -> None:
    layers = [(state, layer) for state, layer in state_map.layers().items() if layer]
    if not layers:
        return
    lines.append("```css")
    for i, (state, layer) in enumerate(layers):
        label = state if part == "root" else f"{part}: {state}"
        lines.append(f"/* {label} */")
        for prop, value in layer.items():
            lines.append(f"{camel_to_kebab(prop)}: {value};")
        if i < len(layers) - 1:
            lines.append("")
    lines += ["```", ""]


def render(config: DesignConfig) -> str:
    tokens = config.tokens
    lines = [
        "# Design System — Generated by DesignKit",
        "",
        "When generating UI for this project, follow these design rules exactly.",
        "",
    ]

    if tokens.colors is not None:
        light, dark = tokens.colors.light, tokens.colors.dark
        lines += ["## Colors", "", "### Light Mode"]
        lines.append(f"- Background: {light.background}")
        lines.append(f"- Surface: {light.surface}")
        lines.append(f"- Primary: {light.primary}")
        lines.append(f"- Secondary: {light.secondary}")
        lines.append(f"- Accent: {light.accent}")
        lines.append(f"- Text: {light.text}")
        lines.append(f"- Text Secondary: {light.text_secondary}")
        lines += ["", "### Dark Mode"]
        lines.append(f"- Background: {dark.background}")
        lines.append(f"- Surface: {dark.surface}")
        lines.append(f"- Primary: {dark.primary}")
        lines.append(f"- Text: {dark.text}")
        lines.append("")

    if tokens.typography is not None:
        t = tokens.typography
        lines += ["## Typography", ""]
        lines.append(f"- Heading font: {t.heading_font}")
        lines.append(f"- Body font: {t.body_font}")
        if t.mono_font:
            lines.append(f"- Mono font: {t.mono_font}")
        lines.append(f"- Scale ratio: {t.scale_ratio:g} ({t.scale_name})")
        lines.append("")

    if tokens.spacing is not None:
        s = tokens.spacing
        lines += ["## Spacing", ""]
        lines.append(f"- Base unit: {s.base_unit:g}px")
        lines.append("- Scale:")
        lines += [f"  - {key}: {value}" for key, value in s.scale.items()]
        lines.append("")

    if tokens.radius is not None:
        lines += ["## Border Radius", ""]
        lines += [f"- {key}: {value}" for key, value in tokens.radius.items()]
        lines.append("")

    if tokens.shadows is not None:
        lines += ["## Shadows", ""]
        lines += [f"- {key}: {value}" for key, value in tokens.shadows.items()]
        lines.append("")

    for meta, pref, record in style_preferences(config):
        lines += [f"## {meta.label}: {pref.name}", ""]
        lines.append(f"- Variant: {record.variant}")
        lines += [_detail_line(key, value) for key, value in record.details.items()]
        lines.append("")
        for part, state_map in record.css.items():
            _css_block(lines, part, state_map)

    motions = motion_preferences(config)
    if motions:
        lines += ["## Motion & Animation", ""]
    for meta, pref, motion in motions:
        lines.append(f"### {meta.label}: {pref.name}")
        lines.append(f"- Duration: {motion.duration}")
        lines.append(f"- Easing: {motion.easing}")
        if motion.trigger:
            lines.append(f"- Trigger: {motion.trigger}")
        if motion.css_properties:
            lines += ["", "```css", "/* properties */"]
            lines += [f"{camel_to_kebab(k)}: {v};" for k, v in motion.css_properties.items()]
            lines.append("```")
        if motion.css_keyframes:
            lines += ["```css", motion.css_keyframes, "```"]
        lines.append("")

    return "\n".join(lines)
