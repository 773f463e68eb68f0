"""
Typography component - Type scale generation.

Sizes follow a geometric progression from a base size: size(n) = base * ratio**n,
in rem, rounded to one decimal. Line heights are the rounded size times a
per-step multiplier.
"""

from __future__ import annotations

from designkit.domain.entities import FontPairing, TypeStep, TypographyData

from .models import (
    ResolveTypographyInput,
    ResolveTypographyOutput,
    StepSpec,
    TypeScalePreset,
)

# --- Presets ---

TYPE_SCALE_PRESETS: tuple[TypeScalePreset, ...] = (
    TypeScalePreset(id="compact", label="Compact", ratio=1.125),
    TypeScalePreset(id="default", label="Default", ratio=1.2),
    TypeScalePreset(id="comfortable", label="Comfortable", ratio=1.25),
    TypeScalePreset(id="expressive", label="Expressive", ratio=1.333),
    TypeScalePreset(id="dramatic", label="Dramatic", ratio=1.5),
)

DEFAULT_PRESET_ID = "default"

SCALE_STEPS: tuple[StepSpec, ...] = (
    StepSpec("h1", 5, True, 1.2, letter_spacing="-0.02em"),
    StepSpec("h2", 4, True, 1.25, letter_spacing="-0.015em"),
    StepSpec("h3", 3, True, 1.3, letter_spacing="-0.01em"),
    StepSpec("h4", 2, True, 1.35),
    StepSpec("h5", 1, True, 1.4),
    StepSpec("h6", 0, True, 1.4),
    StepSpec("body", 0, False, 1.6),
    StepSpec("bodySmall", -1, False, 1.5),
    StepSpec("caption", -2, False, 1.4, letter_spacing="0.02em"),
    StepSpec("overline", -2, False, 1.4, weight_offset=100, letter_spacing="0.08em"),
    StepSpec("button", 0, False, 1, weight_offset=100, letter_spacing="0.02em"),
)


def get_preset(preset_id: str) -> TypeScalePreset:
    """Look up a preset by ID, falling back to the default preset."""
    for preset in TYPE_SCALE_PRESETS:
        if preset.id == preset_id:
            return preset
    return next(p for p in TYPE_SCALE_PRESETS if p.id == DEFAULT_PRESET_ID)


def _round1(value: float) -> float:
    # Half-up, not banker's rounding.
    return int(value * 10 + 0.5) / 10


def _rem(value: float) -> str:
    return f"{value:g}rem"


def generate_type_scale(
    base_size_px: float,
    ratio: float,
    heading_weight: int,
    body_weight: int,
) -> dict[str, TypeStep]:
    """
    Generate the full type scale.

    Args:
        base_size_px: Body size in pixels (16px == 1rem)
        ratio: Geometric ratio between adjacent steps
        heading_weight: Weight for h1-h6
        body_weight: Weight for body steps; overline/button use body_weight + 100

    Returns:
        Mapping of step name to TypeStep, in display order.
    """
    base = base_size_px / 16
    scale: dict[str, TypeStep] = {}

    for step in SCALE_STEPS:
        size = _round1(base * ratio**step.exponent)
        line_height = _round1(size * step.line_height)
        weight = (heading_weight if step.heading else body_weight) + step.weight_offset
        scale[step.name] = TypeStep(
            size=_rem(size),
            line_height=_rem(line_height),
            weight=weight,
            letter_spacing=step.letter_spacing,
        )

    return scale


def resolve_typography(pairing: FontPairing | None, scale_id: str) -> TypographyData | None:
    """Build TypographyData from a font pairing and a scale preset ID."""
    if pairing is None:
        return None

    preset = get_preset(scale_id)
    return TypographyData(
        heading_font=pairing.heading_font,
        body_font=pairing.body_font,
        mono_font=pairing.mono_font,
        scale_ratio=preset.ratio,
        scale_name=preset.label,
        scale=generate_type_scale(
            pairing.base_size,
            preset.ratio,
            pairing.heading_weight,
            pairing.body_weight,
        ),
    )


def run(inp: ResolveTypographyInput) -> ResolveTypographyOutput:
    return ResolveTypographyOutput(typography=resolve_typography(inp.pairing, inp.scale_id))
