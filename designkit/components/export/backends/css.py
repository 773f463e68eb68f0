"""
CSS backend - custom properties, animation variables and component classes.

Color variables are emitted once per mode, light under :root and dark
under a prefers-color-scheme media query. Component classes are expanded
against the light colors with composite effects applied.
"""

from __future__ import annotations

from designkit.components.colors import default_color_mode
from designkit.components.placeholders import resolve_layer
from designkit.domain.entities import DesignConfig

from ..flatten import (
    GROUP_COLORS_DARK,
    GROUP_COLORS_LIGHT,
    GROUP_RADIUS,
    GROUP_SHADOWS,
    GROUP_SPACING,
    camel_to_kebab,
    flatten_tokens,
)
from ..models import TokenEntry
from ..preferences import motion_preferences, style_preferences

HEADER = "/* DesignKit — Generated CSS Custom Properties */"

STATE_SELECTORS = {
    "default": "",
    "hover": ":hover",
    "active": ":active",
    "focus": ":focus",
    "filled": ".filled",
    "error": ".error",
    "disabled": ":disabled",
}

_SCALAR_PREFIXES = {
    GROUP_SPACING: "space",
    GROUP_RADIUS: "radius",
    GROUP_SHADOWS: "shadow",
}


def css_var_name(entry: TokenEntry) -> str:
    """Custom property name for a flattened token (without the value)."""
    segments = entry.segments
    if entry.is_color:
        # colors.<mode>.<role>[.<sub>]
        return "--color-" + "-".join(camel_to_kebab(s) for s in segments[2:])
    if segments[0] == "typography":
        if segments[1] == "scale":
            return f"--text-{camel_to_kebab(segments[2])}-{camel_to_kebab(segments[3])}"
        return "--font-" + camel_to_kebab(segments[1]).removesuffix("-font")
    return f"--{_SCALAR_PREFIXES[entry.group]}-{segments[-1]}"


def _declaration(entry: TokenEntry, indent: str) -> str:
    return f"{indent}{css_var_name(entry)}: {entry.value};"


def _rule(lines: list[str], selector: str, style: dict[str, str]) -> None:
    if not style:
        return
    lines.append(f"{selector} {{")
    for prop, value in style.items():
        lines.append(f"  {camel_to_kebab(prop)}: {value};")
    lines.append("}")


def render(config: DesignConfig) -> str:
    tokens = config.tokens
    entries = flatten_tokens(tokens)
    lines = [HEADER, ""]

    if tokens.colors is not None:
        lines += ["/* Colors — Light Mode */", ":root {"]
        lines += [_declaration(e, "  ") for e in entries if e.group == GROUP_COLORS_LIGHT]
        lines += ["}", ""]
        lines += [
            "/* Colors — Dark Mode */",
            "@media (prefers-color-scheme: dark) {",
            "  :root {",
        ]
        lines += [_declaration(e, "    ") for e in entries if e.group == GROUP_COLORS_DARK]
        lines += ["  }", "}", ""]

    if tokens.typography is not None:
        t = tokens.typography
        lines += ["/* Typography */", ":root {"]
        lines.append(f"  --font-heading: '{t.heading_font}', sans-serif;")
        lines.append(f"  --font-body: '{t.body_font}', sans-serif;")
        if t.mono_font:
            lines.append(f"  --font-mono: '{t.mono_font}', monospace;")
        lines += [
            _declaration(e, "  ")
            for e in entries
            if e.path.startswith("typography.scale.")
        ]
        lines += ["}", ""]

    for group, title in (
        (GROUP_SPACING, "Spacing"),
        (GROUP_RADIUS, "Border Radius"),
        (GROUP_SHADOWS, "Shadows"),
    ):
        group_entries = [e for e in entries if e.group == group]
        if group_entries:
            lines += [f"/* {title} */", ":root {"]
            lines += [_declaration(e, "  ") for e in group_entries]
            lines += ["}", ""]

    motions = motion_preferences(config)
    if motions:
        lines += ["/* Animation */", ":root {"]
        for meta, _pref, motion in motions:
            lines.append(f"  --ease-{meta.motion_key}: {motion.easing};")
            lines.append(f"  --duration-{meta.motion_key}: {motion.duration};")
        lines += ["}", ""]
        for _meta, _pref, motion in motions:
            if motion.css_keyframes:
                lines += [motion.css_keyframes, ""]

    styles = style_preferences(config)
    if styles:
        colors = tokens.colors.light if tokens.colors is not None else default_color_mode()
        lines += ["", "/* Component Styles */", ""]
        for meta, _pref, record in styles:
            for part, state_map in record.css.items():
                base = f".{meta.css_class}" if part == "root" else f".{meta.css_class}-{part}"
                for state, layer in state_map.layers().items():
                    _rule(lines, base + STATE_SELECTORS[state], resolve_layer(layer, colors))
            lines.append("")

    return "\n".join(lines)
