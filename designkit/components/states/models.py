"""
States component models.

Interaction state is a small immutable value; every transition returns a
new value.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from designkit.domain.entities import ButtonColorStrategy, ColorMode, CSSStateMap


@dataclass(frozen=True)
class InteractionState:
    """
    Pointer, focus and data-driven flags for one rendered element.

    - hover: pointer-enter .. pointer-leave
    - active: pointer-down .. pointer-up/leave, only while hovered
    - focus: focus .. blur, independent of the pointer
    - filled/error: set from data, may combine with hover/active
    - disabled: overrides everything until enabled again
    """

    hover: bool = False
    active: bool = False
    focus: bool = False
    filled: bool = False
    error: bool = False
    disabled: bool = False

    def pointer_enter(self) -> InteractionState:
        if self.disabled:
            return self
        return replace(self, hover=True)

    def pointer_leave(self) -> InteractionState:
        return replace(self, hover=False, active=False)

    def pointer_down(self) -> InteractionState:
        if self.disabled or not self.hover:
            return self
        return replace(self, active=True)

    def pointer_up(self) -> InteractionState:
        return replace(self, active=False)

    def on_focus(self) -> InteractionState:
        if self.disabled:
            return self
        return replace(self, focus=True)

    def on_blur(self) -> InteractionState:
        return replace(self, focus=False)

    def set_filled(self, filled: bool) -> InteractionState:
        return replace(self, filled=filled)

    def set_error(self, error: bool) -> InteractionState:
        return replace(self, error=error)

    def disable(self) -> InteractionState:
        return replace(self, disabled=True, hover=False, active=False, focus=False)

    def enable(self) -> InteractionState:
        return replace(self, disabled=False)

    def active_states(self) -> list[str]:
        """Ordered layer names to merge, always starting with default."""
        if self.disabled:
            return ["default", "disabled"]
        states = ["default"]
        if self.filled:
            states.append("filled")
        if self.error:
            states.append("error")
        if self.focus:
            states.append("focus")
        if self.hover:
            states.append("hover")
            if self.active:
                states.append("active")
        return states


@dataclass(frozen=True)
class StrategyColors:
    """Base colors a button color strategy paints beneath its state layers."""

    background: str
    text: str
    border: str | None = None

    def as_style(self) -> dict[str, str]:
        style = {"background": self.background, "color": self.text}
        if self.border is not None:
            style["borderColor"] = self.border
        return style


# --- Input/Output Models ---


@dataclass(frozen=True)
class OverlayInput:
    """Input for resolving a state map for one interaction state."""

    css: CSSStateMap
    colors: ColorMode
    state: InteractionState = field(default_factory=InteractionState)
    strategy: ButtonColorStrategy | None = None


@dataclass(frozen=True)
class OverlayOutput:
    style: dict[str, str]
    directives: dict[str, str] = field(default_factory=dict)
