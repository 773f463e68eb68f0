"""
Placeholder component - Token expression and composite effect expansion.
"""

from .component import (
    SHADOW_LAYERS,
    TOKEN_PATTERN,
    TOKEN_ROLES,
    apply_effect,
    effect_key,
    expand,
    find_unknown_tokens,
    is_meta_key,
    meta_directives,
    parse_effect,
    resolve_layer,
    run,
    run_expand,
    shadow_value,
    validate_layer,
)
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

__all__ = [
    # Component entry points
    "run",
    "run_expand",
    # Models
    "ExpandInput",
    "ExpandOutput",
    "ResolveLayerInput",
    "ResolveLayerOutput",
    "ValidationError",
    # Effects
    "EffectKey",
    "ShadowPreset",
    "CompositeEffect",
    "BackgroundFill",
    "TextFill",
    "BorderBottomAccent",
    "HoverShadow",
    # Functions
    "expand",
    "is_meta_key",
    "find_unknown_tokens",
    "effect_key",
    "parse_effect",
    "apply_effect",
    "shadow_value",
    "validate_layer",
    "resolve_layer",
    "meta_directives",
    # Constants
    "MARKER",
    "TOKEN_ROLES",
    "TOKEN_PATTERN",
    "SHADOW_LAYERS",
]
