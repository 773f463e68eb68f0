"""
Colors component - Layered light/dark color resolution.
"""

from .component import (
    DEFAULT_COLORS,
    DEFAULT_SEMANTIC,
    HEX_COLOR_PATTERN,
    SEMANTIC_PREFIX,
    default_color_mode,
    format_alpha,
    hex_to_rgb,
    is_color_key,
    is_hex_color,
    resolve_colors,
    resolve_mode,
    rgba,
    run,
    run_resolve_mode,
)
from .models import (
    ResolveColorsInput,
    ResolveColorsOutput,
    ResolveModeInput,
    ResolveModeOutput,
)

__all__ = [
    # Component entry points
    "run",
    "run_resolve_mode",
    # Models
    "ResolveColorsInput",
    "ResolveColorsOutput",
    "ResolveModeInput",
    "ResolveModeOutput",
    # Functions
    "resolve_mode",
    "resolve_colors",
    "default_color_mode",
    "hex_to_rgb",
    "rgba",
    "format_alpha",
    "is_hex_color",
    "is_color_key",
    # Constants
    "DEFAULT_COLORS",
    "DEFAULT_SEMANTIC",
    "HEX_COLOR_PATTERN",
    "SEMANTIC_PREFIX",
]
