"""
Placeholder component - Token expression expansion.

Token grammar, all introduced by the reserved marker ``__``:

- ``__<role>``       the role's resolved color
- ``__<role>-<NN>``  the role's color at NN% opacity, as rgba()

Roles are matched longest name first and must end at a non-letter, so
compound names (``primaryForeground``) always win over their prefixes
(``primary``) and unknown identifiers pass through untouched. Expansion
is a single left-to-right pass, and expanded output never contains the
marker, so re-expanding is a no-op.

Meta-keys (property names starting with the marker) are never expanded
as values; a closed set of them carries composite effects.
"""

from __future__ import annotations

import re

from designkit.components.colors import rgba
from designkit.domain.entities import COLOR_ROLES, SEMANTIC_ROLES, ColorMode

from .models import (
    MARKER,
    BackgroundFill,
    BorderBottomAccent,
    CompositeEffect,
    EffectKey,
    ExpandInput,
    ExpandOutput,
    HoverShadow,
    ResolveLayerInput,
    ResolveLayerOutput,
    ShadowPreset,
    TextFill,
    ValidationError,
)

TOKEN_ROLES: tuple[str, ...] = tuple(
    sorted(COLOR_ROLES + SEMANTIC_ROLES, key=lambda name: (-len(name), name))
)

TOKEN_PATTERN = re.compile(
    re.escape(MARKER)
    + "("
    + "|".join(re.escape(name) for name in TOKEN_ROLES)
    + r")(?![A-Za-z])(?:-(\d+))?"
)

# Any marker-prefixed identifier, known or not.
_ANY_TOKEN = re.compile(re.escape(MARKER) + r"[A-Za-z][\w-]*")

_BG_ALPHA = re.compile(r"^primary-(\d+)$")

# (blur/spread prefix, alpha) pairs per shadow layer.
SHADOW_LAYERS: dict[ShadowPreset, tuple[tuple[str, float], ...]] = {
    ShadowPreset.GLOW: (("0 0 14px", 0.4), ("0 0 28px", 0.2)),
    ShadowPreset.GLOW_TIGHT: (("0 0 8px", 0.5), ("0 0 16px", 0.3)),
    ShadowPreset.NEON: (("0 0 10px", 0.5), ("0 0 24px", 0.3), ("inset 0 0 10px", 0.1)),
    ShadowPreset.NEON_TIGHT: (("0 0 6px", 0.6), ("0 0 14px", 0.4)),
    ShadowPreset.PULSE: (("0 0 0 4px", 0.3), ("0 0 16px", 0.2)),
}


# --- Expansion ---


def expand(value: str, colors: ColorMode) -> str:
    """
    Expand every recognized token in a CSS value.

    Args:
        value: CSS value expression, possibly containing tokens
        colors: Resolved color set for the active mode

    Returns:
        The value with known tokens substituted; everything else untouched.
    """
    if MARKER not in value:
        return value

    def substitute(match: re.Match[str]) -> str:
        color = colors.role(match.group(1))
        percent = match.group(2)
        if percent is None:
            return color
        return rgba(color, int(percent) / 100)

    return TOKEN_PATTERN.sub(substitute, value)


def is_meta_key(key: str) -> bool:
    return key.startswith(MARKER)


def find_unknown_tokens(value: str) -> list[str]:
    """Marker-prefixed identifiers in value that expansion would leave behind."""
    remainder = TOKEN_PATTERN.sub("", value)
    return _ANY_TOKEN.findall(remainder)


# --- Composite Effects ---


def effect_key(key: str) -> EffectKey | None:
    try:
        return EffectKey(key)
    except ValueError:
        return None


def parse_effect(key: str, value: str) -> CompositeEffect | None:
    """
    Parse a meta-key/value pair into a composite effect.

    Returns None when key is not an effect key or value is outside the
    effect's vocabulary.
    """
    kind = effect_key(key)
    if kind is None:
        return None

    if kind in (EffectKey.HOVER_BG, EffectKey.DEFAULT_BG):
        if value == "primary-solid":
            return BackgroundFill()
        match = _BG_ALPHA.match(value)
        if match:
            return BackgroundFill(alpha=int(match.group(1)) / 100)
        return None

    if kind == EffectKey.HOVER_TEXT:
        if value == "primaryForeground":
            return TextFill(role="primaryForeground")
        if value == "primary":
            return TextFill(role="primary")
        return None

    if kind == EffectKey.HOVER_BORDER_BOTTOM:
        return BorderBottomAccent()

    try:
        return HoverShadow(preset=ShadowPreset(value))
    except ValueError:
        return None


def shadow_value(preset: ShadowPreset, primary: str) -> str:
    return ", ".join(f"{prefix} {rgba(primary, alpha)}" for prefix, alpha in SHADOW_LAYERS[preset])


def apply_effect(effect: CompositeEffect, colors: ColorMode) -> dict[str, str]:
    """The concrete CSS properties a composite effect writes."""
    if isinstance(effect, BackgroundFill):
        if effect.alpha is None:
            return {"backgroundColor": colors.primary}
        return {"backgroundColor": rgba(colors.primary, effect.alpha)}
    if isinstance(effect, TextFill):
        return {"color": colors.role(effect.role)}
    if isinstance(effect, BorderBottomAccent):
        return {"borderBottomColor": colors.primary}
    return {"boxShadow": shadow_value(effect.preset, colors.primary)}


def validate_layer(css: dict[str, str], field_prefix: str = "") -> list[ValidationError]:
    """
    Check a property map for invalid effects and unknown tokens.

    Renderer directives (meta-keys outside the effect vocabulary) are allowed.
    """
    errors: list[ValidationError] = []
    for key, value in css.items():
        field = f"{field_prefix}{key}"
        if is_meta_key(key):
            if effect_key(key) is not None and parse_effect(key, value) is None:
                errors.append(
                    ValidationError(
                        field=field,
                        code="invalid_effect",
                        message=f"Invalid value '{value}' for effect '{key}'",
                    )
                )
            continue
        for token in find_unknown_tokens(value):
            errors.append(
                ValidationError(
                    field=field,
                    code="unknown_token",
                    message=f"Unknown token '{token}' in value '{value}'",
                )
            )
    return errors


# --- Layer Resolution ---


def resolve_layer(css: dict[str, str], colors: ColorMode) -> dict[str, str]:
    """
    Resolve a flat property map into a concrete style.

    Plain properties are expanded; effect meta-keys write their target
    property in place; other meta-keys are dropped.
    """
    style: dict[str, str] = {}
    for key, value in css.items():
        if is_meta_key(key):
            effect = parse_effect(key, value)
            if effect is not None:
                style.update(apply_effect(effect, colors))
            continue
        style[key] = expand(value, colors)
    return style


def meta_directives(css: dict[str, str], colors: ColorMode) -> dict[str, str]:
    """Renderer directives (non-effect meta-keys) with the marker stripped."""
    return {
        key[len(MARKER) :]: expand(value, colors)
        for key, value in css.items()
        if is_meta_key(key) and effect_key(key) is None
    }


# --- Component Entry Points ---


def run_expand(inp: ExpandInput) -> ExpandOutput:
    return ExpandOutput(value=expand(inp.value, inp.colors))


def run(inp: ResolveLayerInput) -> ResolveLayerOutput:
    return ResolveLayerOutput(style=resolve_layer(inp.css, inp.colors))
