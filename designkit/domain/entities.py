from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
Mode = Literal["light", "dark"]
MODES: tuple[Mode, ...] = ("light", "dark")
ButtonColorStrategy = Literal["solid", "outline", "ghost", "soft", "surface", "gradient"]

SHADE_KEYS = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


class WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        # Absent optional sections are omitted, never serialized as null.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Colors ---

class SemanticColors(WireModel):
    success: str
    warning: str
    error: str
    info: str


class ColorMode(WireModel):
    background: str
    surface: str
    surface_alt: str
    border: str
    text: str
    text_secondary: str
    text_muted: str
    primary: str
    primary_foreground: str
    secondary: str
    secondary_foreground: str
    accent: str
    accent_foreground: str
    semantic: SemanticColors

    def role(self, name: str) -> str:
        """Look up a color by its camelCase role name (semantic roles included)."""
        if name in SEMANTIC_ROLES:
            return getattr(self.semantic, name)
        return getattr(self, _ROLE_FIELDS[name])


class ColorPaletteData(WireModel):
    light: ColorMode
    dark: ColorMode
    primary_scale: dict[str, str] = Field(default_factory=lambda: {k: "" for k in SHADE_KEYS})

    def mode(self, mode: Mode) -> ColorMode:
        return self.light if mode == "light" else self.dark


class ColorOverrides(WireModel):
    light: dict[str, str] = Field(default_factory=dict)
    dark: dict[str, str] = Field(default_factory=dict)

    def for_mode(self, mode: Mode) -> dict[str, str]:
        return self.light if mode == "light" else self.dark

    def is_empty(self) -> bool:
        return not self.light and not self.dark


# --- Typography ---

class TypeStep(WireModel):
    size: str
    line_height: str
    weight: int
    letter_spacing: str | None = None


class TypographyData(WireModel):
    heading_font: str
    body_font: str
    mono_font: str | None = None
    scale_ratio: float
    scale_name: str
    scale: dict[str, TypeStep]


class FontPairing(WireModel):
    heading_font: str
    body_font: str
    mono_font: str | None = None
    heading_weight: int = 700
    body_weight: int = 400
    base_size: float = 16


# --- Spacing ---

class SpacingData(WireModel):
    base_unit: float
    scale: dict[str, str]


# --- Component style records ---

class CSSStateMap(WireModel):
    """Interaction-state layers for one styled part of a component."""

    model_config = ConfigDict(extra="forbid")

    default: dict[str, str] = Field(default_factory=dict)
    hover: dict[str, str] | None = None
    active: dict[str, str] | None = None
    focus: dict[str, str] | None = None
    filled: dict[str, str] | None = None
    error: dict[str, str] | None = None
    disabled: dict[str, str] | None = None

    def layer(self, state: str) -> dict[str, str]:
        return getattr(self, state) or {}

    def layers(self) -> dict[str, dict[str, str]]:
        """Present layers in declaration order."""
        return {
            name: value
            for name, value in (
                (field_name, getattr(self, field_name)) for field_name in STATE_NAMES
            )
            if value is not None
        }


class StyleRecord(WireModel):
    variant: str
    css: dict[str, CSSStateMap]
    details: dict[str, Any] = Field(default_factory=dict)


class MotionRecord(WireModel):
    variant: str
    subtype: str = ""
    duration: str
    easing: str
    trigger: str = ""
    css_keyframes: str | None = None
    css_properties: dict[str, str] | None = None


# --- Catalog items ---

class CatalogItem(WireModel):
    id: str
    name: str
    description: str = ""


class PaletteItem(CatalogItem):
    data: ColorPaletteData


class FontPairingItem(CatalogItem):
    data: FontPairing


class SpacingItem(CatalogItem):
    data: SpacingData


class RadiusItem(CatalogItem):
    data: dict[str, str]


class ShadowItem(CatalogItem):
    data: dict[str, str]


class StyleItem(CatalogItem):
    data: StyleRecord


class MotionItem(CatalogItem):
    data: MotionRecord


# --- Selection state ---

class DesignState(WireModel):
    selections: dict[str, str] = Field(default_factory=dict)
    color_picks: ColorOverrides = Field(default_factory=ColorOverrides)
    type_scale: str = "default"


class Preset(WireModel):
    id: str
    name: str
    selections: dict[str, str]
    color_picks: ColorOverrides
    type_scale: str
    created_at: int


# --- Resolved configuration (IR) ---

class TokenSet(WireModel):
    colors: ColorPaletteData | None = None
    typography: TypographyData | None = None
    spacing: SpacingData | None = None
    radius: dict[str, str] | None = None
    shadows: dict[str, str] | None = None


class ComponentPreference(WireModel):
    id: str
    name: str
    style: StyleRecord | None = None
    motion: MotionRecord | None = None


class DesignConfig(WireModel):
    name: str = "DesignKit Export"
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    selections: dict[str, str] = Field(default_factory=dict)
    color_picks: ColorOverrides | None = None
    tokens: TokenSet = Field(default_factory=TokenSet)
    component_preferences: dict[str, ComponentPreference] = Field(default_factory=dict)


# --- Role tables ---

STATE_NAMES = ("default", "hover", "active", "focus", "filled", "error", "disabled")

COLOR_ROLES = (
    "background",
    "surface",
    "surfaceAlt",
    "border",
    "text",
    "textSecondary",
    "textMuted",
    "primary",
    "primaryForeground",
    "secondary",
    "secondaryForeground",
    "accent",
    "accentForeground",
)
SEMANTIC_ROLES = ("success", "warning", "error", "info")

_ROLE_FIELDS = {to_camel(name): name for name in ColorMode.model_fields if name != "semantic"}
