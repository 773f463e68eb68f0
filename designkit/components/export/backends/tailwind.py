"""
Tailwind backend - a typed tailwind.config.ts extending the default theme.

Component style records have no Tailwind equivalent and are not encoded.
Motion keyframes are appended as a comment for the global stylesheet.
"""

from __future__ import annotations

import json
from typing import Any

from designkit.domain.entities import DesignConfig

from ..flatten import ts_key
from ..preferences import keyframes_name, motion_preferences

HEADER = 'import type { Config } from "tailwindcss";'


def build_theme(config: DesignConfig) -> dict[str, Any]:
    """The `theme.extend` object as plain data."""
    tokens = config.tokens
    theme: dict[str, Any] = {}

    if tokens.colors is not None:
        c = tokens.colors.light
        theme["colors"] = {
            "background": c.background,
            "surface": c.surface,
            "border": c.border,
            "foreground": c.text,
            "primary": {"DEFAULT": c.primary, "foreground": c.primary_foreground},
            "secondary": {"DEFAULT": c.secondary, "foreground": c.secondary_foreground},
            "accent": {"DEFAULT": c.accent, "foreground": c.accent_foreground},
            "success": c.semantic.success,
            "warning": c.semantic.warning,
            "error": c.semantic.error,
            "info": c.semantic.info,
        }

    if tokens.radius is not None:
        theme["borderRadius"] = dict(tokens.radius)

    if tokens.shadows is not None:
        theme["boxShadow"] = dict(tokens.shadows)

    if tokens.spacing is not None:
        theme["spacing"] = dict(tokens.spacing.scale)

    if tokens.typography is not None:
        t = tokens.typography
        font_family = {
            "heading": [f"'{t.heading_font}'", "sans-serif"],
            "body": [f"'{t.body_font}'", "sans-serif"],
        }
        if t.mono_font:
            font_family["mono"] = [f"'{t.mono_font}'", "monospace"]
        theme["fontFamily"] = font_family
        theme["fontSize"] = {
            key: [step.size, {"lineHeight": step.line_height, "fontWeight": str(step.weight)}]
            for key, step in t.scale.items()
        }

    animation = {}
    for meta, _pref, motion in motion_preferences(config):
        name = keyframes_name(motion.css_keyframes)
        if name:
            animation[meta.motion_key] = f"{name} {motion.duration} {motion.easing}"
    if animation:
        theme["animation"] = animation

    return theme


def to_ts(value: Any, indent: int) -> str:
    """Render plain data as a TypeScript object literal."""
    pad = " " * indent
    inner = " " * (indent + 2)
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [f"{inner}{ts_key(k)}: {to_ts(v, indent + 2)}," for k, v in value.items()]
        return "{\n" + "\n".join(items) + f"\n{pad}}}"
    if isinstance(value, list):
        return "[" + ", ".join(to_ts(v, indent) for v in value) + "]"
    return json.dumps(value, ensure_ascii=False)


def render(config: DesignConfig) -> str:
    theme = build_theme(config)
    output = "\n".join(
        [
            HEADER,
            "",
            "// DesignKit — Generated Tailwind Config",
            "const config: Config = {",
            '  content: ["./src/**/*.{ts,tsx}"],',
            "  theme: {",
            f"    extend: {to_ts(theme, 4)},",
            "  },",
            "  plugins: [],",
            "};",
            "",
            "export default config;",
            "",
        ]
    )

    blocks = [
        motion.css_keyframes
        for _meta, _pref, motion in motion_preferences(config)
        if keyframes_name(motion.css_keyframes)
    ]
    if blocks:
        commented = "\n *\n".join(
            "\n".join(f" * {line}" for line in block.split("\n")) for block in blocks
        )
        output += f"\n/*\n * Add these @keyframes to your global CSS:\n *\n{commented}\n */\n"

    return output
