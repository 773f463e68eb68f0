"""
States component - Interaction-state overlay resolution.
"""

from .component import merge_layers, overlay, run, strategy_colors
from .models import InteractionState, OverlayInput, OverlayOutput, StrategyColors

__all__ = [
    # Component entry points
    "run",
    # Models
    "InteractionState",
    "OverlayInput",
    "OverlayOutput",
    "StrategyColors",
    # Functions
    "overlay",
    "merge_layers",
    "strategy_colors",
]
