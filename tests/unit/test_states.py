"""
Unit tests for the states component.

Layer merge order, interaction transitions and color strategies.
"""

import pytest

from designkit.components.states import (
    InteractionState,
    OverlayInput,
    merge_layers,
    overlay,
    run,
    strategy_colors,
)
from designkit.domain.entities import CSSStateMap


@pytest.fixture
def button_css() -> CSSStateMap:
    return CSSStateMap(
        default={"color": "__primary", "border": "1px solid __primary", "padding": "8px"},
        hover={"__hoverBg": "primary-10", "color": "__primaryForeground"},
        active={"__hoverBg": "primary-20"},
        disabled={"opacity": "0.5"},
    )


class TestOverlay:
    def test_default_only(self, button_css, default_colors) -> None:
        style = overlay(button_css, ["default"], default_colors)
        assert style == {"color": "#3b82f6", "border": "1px solid #3b82f6", "padding": "8px"}

    def test_later_layer_wins(self, button_css, default_colors) -> None:
        """hover overrides color; unmentioned keys fall through."""
        style = overlay(button_css, ["default", "hover"], default_colors)
        assert style["color"] == "#ffffff"
        assert style["padding"] == "8px"
        assert style["backgroundColor"] == "rgba(59,130,246,0.1)"

    def test_active_effect_replaces_hover_effect(self, button_css, default_colors) -> None:
        style = overlay(button_css, ["default", "hover", "active"], default_colors)
        assert style["backgroundColor"] == "rgba(59,130,246,0.2)"

    def test_missing_layer_is_empty(self, button_css, default_colors) -> None:
        assert overlay(button_css, ["default", "focus"], default_colors) == overlay(
            button_css, ["default"], default_colors
        )

    def test_plain_property_overrides_earlier_effect(self, default_colors) -> None:
        css = CSSStateMap(
            default={"__defaultBg": "primary-solid"},
            hover={"backgroundColor": "transparent"},
        )
        assert overlay(css, ["default", "hover"], default_colors) == {
            "backgroundColor": "transparent"
        }

    def test_merge_layers_unexpanded(self, button_css) -> None:
        merged = merge_layers(button_css, ["default", "hover"])
        assert merged["__hoverBg"] == "primary-10"
        assert merged["color"] == "__primaryForeground"


class TestInteractionState:
    def test_default(self) -> None:
        assert InteractionState().active_states() == ["default"]

    def test_press_requires_hover(self) -> None:
        """Pointer-down outside hover does nothing."""
        assert InteractionState().pointer_down().active is False
        pressed = InteractionState().pointer_enter().pointer_down()
        assert pressed.active_states() == ["default", "hover", "active"]

    def test_leave_clears_active(self) -> None:
        state = InteractionState().pointer_enter().pointer_down().pointer_leave()
        assert state.active_states() == ["default"]

    def test_focus_independent_of_pointer(self) -> None:
        state = InteractionState().on_focus().pointer_enter().pointer_leave()
        assert state.active_states() == ["default", "focus"]

    def test_data_flags_combine_with_hover(self) -> None:
        state = InteractionState().set_filled(True).set_error(True).pointer_enter()
        assert state.active_states() == ["default", "filled", "error", "hover"]

    def test_disabled_overrides_everything(self) -> None:
        state = InteractionState().pointer_enter().on_focus().disable()
        assert state.active_states() == ["default", "disabled"]
        assert state.pointer_enter().hover is False
        assert state.enable().active_states() == ["default"]

    def test_transitions_return_new_values(self) -> None:
        state = InteractionState()
        state.pointer_enter()
        assert state.hover is False


class TestStrategies:
    def test_outline(self, default_colors) -> None:
        colors = strategy_colors(default_colors, "outline")
        assert colors.as_style() == {
            "background": "transparent",
            "color": "#3b82f6",
            "borderColor": "#3b82f6",
        }

    def test_soft(self, default_colors) -> None:
        assert strategy_colors(default_colors, "soft").background == "rgba(59,130,246,0.1)"

    def test_gradient(self, default_colors) -> None:
        colors = strategy_colors(default_colors, "gradient")
        assert colors.background == "linear-gradient(135deg, #3b82f6, #8b5cf6)"
        assert colors.border is None


class TestHoverExample:
    def test_transparent_button_hover_tint(self, ocean_light) -> None:
        """A hover background of primary-20 over a transparent default."""
        css = CSSStateMap(
            default={"backgroundColor": "transparent"},
            hover={"__hoverBg": "primary-20"},
        )
        assert overlay(css, ["default", "hover"], ocean_light) == {
            "backgroundColor": "rgba(14,165,233,0.2)"
        }


class TestRun:
    def test_strategy_beneath_layers(self, button_css, default_colors) -> None:
        out = run(
            OverlayInput(
                css=button_css,
                colors=default_colors,
                state=InteractionState().pointer_enter(),
                strategy="solid",
            )
        )
        assert out.style["background"] == "#3b82f6"
        assert out.style["color"] == "#ffffff"
        assert out.style["backgroundColor"] == "rgba(59,130,246,0.1)"

    def test_directives(self, default_colors) -> None:
        css = CSSStateMap(default={"__indicator": "underline"})
        out = run(OverlayInput(css=css, colors=default_colors))
        assert out.style == {}
        assert out.directives == {"indicator": "underline"}
