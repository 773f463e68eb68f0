"""
Swift backend - SwiftUI theme extensions plus a flattened DesignTokens enum.
"""

from __future__ import annotations

from designkit.domain.entities import ColorMode, DesignConfig

from ..flatten import code_identifier, flatten_tokens, js_number, parse_number, path_identifier, quote, swift_rgb

THEME_COLORS = (
    ("background", "background"),
    ("surface", "surface"),
    ("primary", "primary"),
    ("primaryForeground", "primaryForeground"),
    ("secondary", "secondary"),
    ("accent", "accent"),
    ("text", "text"),
    ("textSecondary", "textSecondary"),
    ("success", "success"),
    ("warning", "warning"),
    ("error", "error"),
    ("info", "info"),
)


def _adaptive_color(lines: list[str], name: str, light: ColorMode, dark: ColorMode, role: str) -> None:
    light_rgb = swift_rgb(light.role(role))
    dark_rgb = swift_rgb(dark.role(role))
    if light_rgb is None or dark_rgb is None:
        lines.append(f"        // {name}: not a hex color")
        return
    lines.append(f"        static let {name} = Color(UIColor {{ tc in")
    lines.append("            tc.userInterfaceStyle == .dark")
    lines.append(f"                ? UIColor({dark_rgb}, alpha: 1)")
    lines.append(f"                : UIColor({light_rgb}, alpha: 1)")
    lines.append("        })")


def _numeric_members(lines: list[str], values: dict[str, str], indent: str) -> None:
    for key, value in values.items():
        number = parse_number(value)
        if number is not None:
            lines.append(f"{indent}static let {code_identifier(key)}: CGFloat = {js_number(number)}")


def render(config: DesignConfig) -> str:
    tokens = config.tokens
    lines = [
        "// DesignKit — Generated Swift Theme",
        "import SwiftUI",
        "import UIKit",
        "",
    ]

    if tokens.colors is not None:
        c = tokens.colors
        lines += ["// MARK: - Colors", "extension Color {", "    enum Theme {"]
        for name, role in THEME_COLORS:
            _adaptive_color(lines, name, c.light, c.dark, role)
        lines += ["    }", "}", ""]

    if tokens.typography is not None:
        t = tokens.typography
        lines += ["// MARK: - Typography", "extension Font {", "    enum Theme {"]
        lines.append(f"        static let headingFamily = {quote(t.heading_font, interpolates=False)}")
        lines.append(f"        static let bodyFamily = {quote(t.body_font, interpolates=False)}")
        for key, step in t.scale.items():
            size = parse_number(step.size)
            if size is None:
                continue
            family = "headingFamily" if key.startswith("h") else "bodyFamily"
            lines.append(
                f"        static let {code_identifier(key)} = "
                f"Font.custom({family}, size: {js_number(size)})"
            )
        lines += ["    }", "}", ""]

    if tokens.spacing is not None:
        lines += ["// MARK: - Spacing", "enum Spacing {"]
        _numeric_members(lines, tokens.spacing.scale, "    ")
        lines += ["}", ""]

    if tokens.radius is not None:
        lines += ["// MARK: - Corner Radius", "enum CornerRadius {"]
        _numeric_members(lines, tokens.radius, "    ")
        lines += ["}", ""]

    if tokens.shadows is not None:
        lines += ["// MARK: - Shadows", "enum AppShadow {"]
        for key, value in tokens.shadows.items():
            lines.append(f"    static let {code_identifier(key)} = {quote(value, interpolates=False)}")
        lines += ["}", ""]

    entries = flatten_tokens(tokens)
    if entries:
        lines += ["// MARK: - Design Tokens", "enum DesignTokens {"]
        for entry in entries:
            name = path_identifier(entry.segments, capitalize=False)
            rgb = swift_rgb(entry.value) if entry.is_color else None
            if rgb is not None:
                lines.append(f"    static let {name} = Color({rgb})")
            else:
                lines.append(f"    static let {name} = {quote(entry.value, interpolates=False)}")
        lines += ["}", ""]

    return "\n".join(lines)
