"""
Placeholder component models.

Composite effects are a closed, tagged vocabulary carried under meta-keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from designkit.domain.entities import ColorMode

# Reserved marker for token expressions and meta-keys.
MARKER = "__"


class EffectKey(str, Enum):
    """Meta-keys whose names signal a composite effect."""

    HOVER_BG = "__hoverBg"
    DEFAULT_BG = "__defaultBg"
    HOVER_TEXT = "__hoverText"
    HOVER_BORDER_BOTTOM = "__hoverBorderBottom"
    HOVER_SHADOW = "__hoverShadow"


class ShadowPreset(str, Enum):
    GLOW = "glow"
    GLOW_TIGHT = "glow-tight"
    NEON = "neon"
    NEON_TIGHT = "neon-tight"
    PULSE = "pulse"


# --- Composite Effects ---


@dataclass(frozen=True)
class BackgroundFill:
    """Primary background; alpha None means fully solid."""

    alpha: float | None = None


@dataclass(frozen=True)
class TextFill:
    role: Literal["primary", "primaryForeground"]


@dataclass(frozen=True)
class BorderBottomAccent:
    pass


@dataclass(frozen=True)
class HoverShadow:
    preset: ShadowPreset


CompositeEffect = BackgroundFill | TextFill | BorderBottomAccent | HoverShadow


# --- Validation Error ---


@dataclass(frozen=True)
class ValidationError:
    """Token or effect validation error."""

    field: str
    code: str
    message: str


# --- Input/Output Models ---


@dataclass(frozen=True)
class ExpandInput:
    """Input for expanding a single CSS value."""

    value: str
    colors: ColorMode


@dataclass(frozen=True)
class ExpandOutput:
    value: str


@dataclass(frozen=True)
class ResolveLayerInput:
    """Input for resolving a flat property map (one state layer)."""

    css: dict[str, str]
    colors: ColorMode


@dataclass(frozen=True)
class ResolveLayerOutput:
    style: dict[str, str]
