from datetime import UTC, datetime

import pytest

from designkit.catalog import Catalog, load_catalog
from designkit.components.assemble import assemble
from designkit.components.colors import default_color_mode, resolve_mode
from designkit.domain.entities import ColorMode, ColorOverrides, DesignConfig, DesignState

FIXED_TIME = datetime(2025, 1, 1, tzinfo=UTC)

FULL_SELECTIONS = {
    "colors": "ocean",
    "typography": "inter",
    "spacing": "default",
    "radius": "moderate",
    "shadows": "subtle",
    "buttons": "thin-outline",
    "inputs": "bordered-text",
    "cards": "flat-border",
    "tabs": "tab-underline",
    "button-animations": "scale-down",
    "hover-animations": "lift-shadow",
}


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """The packaged seed catalog."""
    return load_catalog()


@pytest.fixture
def default_colors() -> ColorMode:
    return default_color_mode()


@pytest.fixture
def ocean_light(catalog: Catalog) -> ColorMode:
    palette = catalog.find("colors", "ocean")
    return resolve_mode("light", {}, palette.data)


@pytest.fixture
def full_state() -> DesignState:
    return DesignState(
        selections=dict(FULL_SELECTIONS),
        color_picks=ColorOverrides(light={"accent": "#ff00aa"}),
        type_scale="default",
    )


@pytest.fixture
def full_config(catalog: Catalog, full_state: DesignState) -> DesignConfig:
    """Config with every token group and a few component preferences."""
    return assemble(
        full_state.selections,
        full_state.color_picks,
        full_state.type_scale,
        catalog,
        created_at=FIXED_TIME,
    ).config


@pytest.fixture
def empty_config() -> DesignConfig:
    return DesignConfig(created_at=FIXED_TIME)
