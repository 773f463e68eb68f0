"""
Colors component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from designkit.domain.entities import ColorMode, ColorOverrides, ColorPaletteData, Mode


@dataclass(frozen=True)
class ResolveModeInput:
    """Input for resolving a single color mode."""

    mode: Mode
    overrides: dict[str, str]
    palette: ColorPaletteData | None = None


@dataclass(frozen=True)
class ResolveModeOutput:
    """A complete color set for one mode."""

    mode: Mode
    colors: ColorMode


@dataclass(frozen=True)
class ResolveColorsInput:
    """Input for resolving both modes."""

    overrides: ColorOverrides
    palette: ColorPaletteData | None = None


@dataclass(frozen=True)
class ResolveColorsOutput:
    """
    Resolved light/dark colors.

    colors is None when no palette is selected and no override exists.
    """

    colors: ColorPaletteData | None
