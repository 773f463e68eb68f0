"""
Typography component - Font pairing and generated type scale.
"""

from .component import (
    DEFAULT_PRESET_ID,
    SCALE_STEPS,
    TYPE_SCALE_PRESETS,
    generate_type_scale,
    get_preset,
    resolve_typography,
    run,
)
from .models import (
    ResolveTypographyInput,
    ResolveTypographyOutput,
    StepSpec,
    TypeScalePreset,
)

__all__ = [
    "run",
    "ResolveTypographyInput",
    "ResolveTypographyOutput",
    "StepSpec",
    "TypeScalePreset",
    "generate_type_scale",
    "get_preset",
    "resolve_typography",
    "DEFAULT_PRESET_ID",
    "SCALE_STEPS",
    "TYPE_SCALE_PRESETS",
]
