"""
States component - Interaction-state overlay resolution.

Layers merge left to right with a shallow overwrite: later layers win on
conflict, unmentioned keys fall through from earlier ones. Each layer is
expanded before merging, so a composite effect lands at the position of
the layer that declares it and a later plain property can still override
it. Meta-keys never reach the result.
"""

from __future__ import annotations

from collections.abc import Iterable

from designkit.components.colors import rgba
from designkit.components.placeholders import meta_directives, resolve_layer
from designkit.domain.entities import ButtonColorStrategy, ColorMode, CSSStateMap

from .models import OverlayInput, OverlayOutput, StrategyColors


def merge_layers(css: CSSStateMap, active_states: Iterable[str]) -> dict[str, str]:
    """Shallow left-to-right merge of the named layers, unexpanded."""
    merged: dict[str, str] = {}
    for state in active_states:
        merged.update(css.layer(state))
    return merged


def overlay(
    css: CSSStateMap,
    active_states: Iterable[str],
    colors: ColorMode,
) -> dict[str, str]:
    """
    Resolve a CSSStateMap for an ordered list of active states.

    Args:
        css: The component part's state layers
        active_states: Layer names in merge order, e.g. ["default", "hover"]
        colors: Resolved color set for the active mode

    Returns:
        Flat, fully expanded style with meta-keys removed.
    """
    style: dict[str, str] = {}
    for state in active_states:
        style.update(resolve_layer(css.layer(state), colors))
    return style


def strategy_colors(colors: ColorMode, strategy: ButtonColorStrategy) -> StrategyColors:
    if strategy == "solid":
        return StrategyColors(background=colors.primary, text=colors.primary_foreground)
    if strategy == "outline":
        return StrategyColors(background="transparent", text=colors.primary, border=colors.primary)
    if strategy == "ghost":
        return StrategyColors(background="transparent", text=colors.primary)
    if strategy == "soft":
        return StrategyColors(background=rgba(colors.primary, 0.1), text=colors.primary)
    if strategy == "surface":
        return StrategyColors(background=colors.surface, text=colors.text, border=colors.border)
    return StrategyColors(
        background=f"linear-gradient(135deg, {colors.primary}, {colors.accent})",
        text=colors.primary_foreground,
    )


def run(inp: OverlayInput) -> OverlayOutput:
    """
    Resolve the style for an element in a given interaction state.

    When a color strategy is given, its base colors sit beneath the merged
    state layers.
    """
    states = inp.state.active_states()

    style: dict[str, str] = {}
    if inp.strategy is not None:
        style.update(strategy_colors(inp.colors, inp.strategy).as_style())
    style.update(overlay(inp.css, states, inp.colors))

    merged = merge_layers(inp.css, states)
    return OverlayOutput(style=style, directives=meta_directives(merged, inp.colors))
