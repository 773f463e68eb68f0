"""
Typography component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from designkit.domain.entities import FontPairing, TypographyData


@dataclass(frozen=True)
class TypeScalePreset:
    id: str
    label: str
    ratio: float


@dataclass(frozen=True)
class StepSpec:
    """One step of the generated scale, relative to the base size."""

    name: str
    exponent: int
    heading: bool
    line_height: float
    weight_offset: int = 0
    letter_spacing: str | None = None


@dataclass(frozen=True)
class ResolveTypographyInput:
    pairing: FontPairing | None
    scale_id: str = "default"


@dataclass(frozen=True)
class ResolveTypographyOutput:
    typography: TypographyData | None
