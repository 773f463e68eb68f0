"""
Token flattening and per-token encodings.

flatten_tokens is the single source of token paths for the CSS, Swift and
Kotlin backends and for the token browser.
"""

from __future__ import annotations

import re

from designkit.components.colors import hex_to_rgb
from designkit.domain.entities import TokenSet

from .models import TokenEntry, TokenFormat

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NUMBER_PREFIX = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_NON_WORD = re.compile(r"[^A-Za-z0-9]+")

GROUP_COLORS_LIGHT = "Colors (Light)"
GROUP_COLORS_DARK = "Colors (Dark)"
GROUP_TYPOGRAPHY = "Typography"
GROUP_SPACING = "Spacing"
GROUP_RADIUS = "Radius"
GROUP_SHADOWS = "Shadows"


# --- Flattening ---


def flatten_tokens(tokens: TokenSet) -> list[TokenEntry]:
    """
    Flatten resolved tokens into dot-path entries, in a stable order.

    Colors cover both modes including semantic roles; typography covers
    font families and every scale field; spacing, radius and shadows are
    one entry per key.
    """
    entries: list[TokenEntry] = []

    if tokens.colors is not None:
        for mode, group in (("light", GROUP_COLORS_LIGHT), ("dark", GROUP_COLORS_DARK)):
            wire = getattr(tokens.colors, mode).to_wire()
            for key, value in wire.items():
                if isinstance(value, dict):
                    for sub_key, sub_value in value.items():
                        entries.append(TokenEntry(f"colors.{mode}.{key}.{sub_key}", sub_value, group))
                else:
                    entries.append(TokenEntry(f"colors.{mode}.{key}", value, group))

    if tokens.typography is not None:
        t = tokens.typography
        entries.append(TokenEntry("typography.headingFont", t.heading_font, GROUP_TYPOGRAPHY))
        entries.append(TokenEntry("typography.bodyFont", t.body_font, GROUP_TYPOGRAPHY))
        if t.mono_font:
            entries.append(TokenEntry("typography.monoFont", t.mono_font, GROUP_TYPOGRAPHY))
        for key, step in t.scale.items():
            prefix = f"typography.scale.{key}"
            entries.append(TokenEntry(f"{prefix}.size", step.size, GROUP_TYPOGRAPHY))
            entries.append(TokenEntry(f"{prefix}.lineHeight", step.line_height, GROUP_TYPOGRAPHY))
            entries.append(TokenEntry(f"{prefix}.weight", str(step.weight), GROUP_TYPOGRAPHY))

    if tokens.spacing is not None:
        for key, value in tokens.spacing.scale.items():
            entries.append(TokenEntry(f"spacing.{key}", value, GROUP_SPACING))

    if tokens.radius is not None:
        for key, value in tokens.radius.items():
            entries.append(TokenEntry(f"radius.{key}", value, GROUP_RADIUS))

    if tokens.shadows is not None:
        for key, value in tokens.shadows.items():
            entries.append(TokenEntry(f"shadows.{key}", value, GROUP_SHADOWS))

    return entries


# --- Naming ---


def camel_to_kebab(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def code_identifier(key: str) -> str:
    """
    A key as a bare identifier for Swift/Kotlin/Dart.

    Keys starting with a digit get a leading underscore; other invalid
    characters become underscores.
    """
    ident = _NON_WORD.sub("_", key)
    if not ident or ident[0].isdigit():
        ident = f"_{ident}"
    return ident


def path_identifier(segments: tuple[str, ...], capitalize: bool) -> str:
    """Join path segments into one camelCase (or PascalCase) identifier."""
    words = [word for segment in segments for word in _NON_WORD.split(segment) if word]
    joined = "".join(word[:1].upper() + word[1:] for word in words)
    if not capitalize:
        joined = joined[:1].lower() + joined[1:]
    if not joined or joined[0].isdigit():
        joined = f"_{joined}"
    return joined


def ts_key(key: str) -> str:
    """Object-literal key, quoted only when it is not a valid identifier."""
    if _IDENTIFIER.match(key):
        return key
    return f'"{key}"'


def quote(value: str, interpolates: bool = True) -> str:
    """
    Double-quoted string literal.

    `$` is escaped for targets that interpolate it (Kotlin, Dart).
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    if interpolates:
        escaped = escaped.replace("$", "\\$")
    return f'"{escaped}"'


# --- Numbers ---


def parse_number(value: str) -> float | None:
    """Leading numeric part of a CSS length ("16px" -> 16.0), None if absent."""
    match = _NUMBER_PREFIX.match(value)
    if match is None:
        return None
    return float(match.group(0))


def js_number(value: float) -> str:
    """Render a number the way JS prints it (16, 0.5, 1.25)."""
    if value == int(value):
        return str(int(value))
    return repr(value)


# --- Color Encodings ---


def swift_rgb(hex_color: str) -> str | None:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    r, g, b = (f"{channel / 255:.3f}" for channel in rgb)
    return f"red: {r}, green: {g}, blue: {b}"


def argb_literal(hex_color: str) -> str | None:
    """Opaque 0xAARRGGBB literal, as Kotlin and Flutter colors take it."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return "0xFF" + "".join(f"{channel:02X}" for channel in rgb)


def kotlin_color(hex_color: str) -> str | None:
    literal = argb_literal(hex_color)
    return f"Color({literal})" if literal else None


# --- Per-token Encodings ---


def format_token_value(entry: TokenEntry, fmt: TokenFormat) -> str:
    """
    Encode a single token.

    css:    --colors-light-primary: #3b82f6;
    js:     primary: "#3b82f6",
    swift:  static let primary = Color(red: 0.231, green: 0.510, blue: 0.965)
    kotlin: val Primary = Color(0xFF3B82F6)
    """
    key = entry.key

    if fmt == "css":
        return f"--{entry.path.replace('.', '-')}: {entry.value};"

    if fmt == "js":
        return f"{ts_key(key)}: {quote(entry.value, interpolates=False)},"

    if fmt == "swift":
        name = code_identifier(key)
        rgb = swift_rgb(entry.value) if entry.is_color else None
        if rgb is not None:
            return f"static let {name} = Color({rgb})"
        return f"static let {name} = {quote(entry.value, interpolates=False)}"

    name = code_identifier(key[:1].upper() + key[1:])
    color = kotlin_color(entry.value) if entry.is_color else None
    if color is not None:
        return f"val {name} = {color}"
    return f"val {name} = {quote(entry.value)}"
