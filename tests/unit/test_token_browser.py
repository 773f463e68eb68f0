"""
Unit tests for token flattening and per-token encodings.
"""

import pytest

from designkit.components.export import TokenEntry, flatten_tokens, format_token_value
from designkit.components.export.flatten import (
    GROUP_COLORS_DARK,
    GROUP_COLORS_LIGHT,
    GROUP_SHADOWS,
    GROUP_TYPOGRAPHY,
    argb_literal,
    camel_to_kebab,
    code_identifier,
    js_number,
    parse_number,
    path_identifier,
    quote,
    swift_rgb,
    ts_key,
)
from designkit.domain.entities import TokenSet


class TestFlatten:
    def test_empty_tokens(self) -> None:
        assert flatten_tokens(TokenSet()) == []

    def test_group_order(self, full_config) -> None:
        groups = list(dict.fromkeys(e.group for e in flatten_tokens(full_config.tokens)))
        assert groups == [
            GROUP_COLORS_LIGHT,
            GROUP_COLORS_DARK,
            GROUP_TYPOGRAPHY,
            "Spacing",
            "Radius",
            GROUP_SHADOWS,
        ]

    def test_color_paths(self, full_config) -> None:
        paths = {e.path: e.value for e in flatten_tokens(full_config.tokens)}
        assert paths["colors.light.primary"] == "#0ea5e9"
        assert paths["colors.dark.semantic.error"] == "#f87171"
        assert paths["colors.light.accent"] == "#ff00aa"

    def test_seventeen_colors_per_mode(self, full_config) -> None:
        entries = flatten_tokens(full_config.tokens)
        assert len([e for e in entries if e.group == GROUP_COLORS_LIGHT]) == 17

    def test_typography_paths(self, full_config) -> None:
        paths = [e.path for e in flatten_tokens(full_config.tokens) if e.group == GROUP_TYPOGRAPHY]
        assert paths[:5] == [
            "typography.headingFont",
            "typography.bodyFont",
            "typography.monoFont",
            "typography.scale.h1.size",
            "typography.scale.h1.lineHeight",
        ]
        assert "typography.scale.button.weight" in paths

    def test_scalar_paths(self, full_config) -> None:
        paths = {e.path: e.value for e in flatten_tokens(full_config.tokens)}
        assert paths["spacing.16"] == "64px"
        assert paths["radius.full"] == "9999px"
        assert paths["shadows.inner"] == "inset 0 1px 2px rgba(0,0,0,0.05)"

    def test_entry_properties(self) -> None:
        entry = TokenEntry("colors.light.semantic.info", "#3b82f6", GROUP_COLORS_LIGHT)
        assert entry.segments == ("colors", "light", "semantic", "info")
        assert entry.key == "info"
        assert entry.is_color


class TestFormatTokenValue:
    @pytest.fixture
    def primary(self) -> TokenEntry:
        return TokenEntry("colors.light.primary", "#3b82f6", GROUP_COLORS_LIGHT)

    def test_css(self, primary) -> None:
        assert format_token_value(primary, "css") == "--colors-light-primary: #3b82f6;"

    def test_js(self, primary) -> None:
        assert format_token_value(primary, "js") == 'primary: "#3b82f6",'

    def test_swift_color(self, primary) -> None:
        assert format_token_value(primary, "swift") == (
            "static let primary = Color(red: 0.231, green: 0.510, blue: 0.965)"
        )

    def test_kotlin_color(self, primary) -> None:
        assert format_token_value(primary, "kotlin") == "val Primary = Color(0xFF3B82F6)"

    def test_non_color_strings(self) -> None:
        entry = TokenEntry("spacing.4", "16px", "Spacing")
        assert format_token_value(entry, "js") == '"4": "16px",'
        assert format_token_value(entry, "swift") == 'static let _4 = "16px"'
        assert format_token_value(entry, "kotlin") == 'val _4 = "16px"'

    def test_non_hex_color_quoted(self) -> None:
        entry = TokenEntry("colors.dark.border", "transparent", GROUP_COLORS_DARK)
        assert format_token_value(entry, "swift") == 'static let border = "transparent"'
        assert format_token_value(entry, "kotlin") == 'val Border = "transparent"'


class TestNaming:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("textSecondary", "text-secondary"), ("bodySmall", "body-small"), ("h1", "h1"), ("2xl", "2xl")],
    )
    def test_camel_to_kebab(self, name: str, expected: str) -> None:
        assert camel_to_kebab(name) == expected

    def test_code_identifier(self) -> None:
        assert code_identifier("md") == "md"
        assert code_identifier("2xl") == "_2xl"
        assert code_identifier("0.5") == "_0_5"

    def test_path_identifier(self) -> None:
        segments = ("colors", "light", "semantic", "success")
        assert path_identifier(segments, capitalize=False) == "colorsLightSemanticSuccess"
        assert path_identifier(segments, capitalize=True) == "ColorsLightSemanticSuccess"

    def test_ts_key(self) -> None:
        assert ts_key("primary") == "primary"
        assert ts_key("2xl") == '"2xl"'
        assert ts_key("button-press") == '"button-press"'

    def test_quote(self) -> None:
        assert quote('a "b" \\ $c') == '"a \\"b\\" \\\\ \\$c"'
        assert quote("$c", interpolates=False) == '"$c"'


class TestNumbers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("16px", 16.0), ("0.5rem", 0.5), (".75em", 0.75), ("-2px", -2.0), ("none", None), ("", None)],
    )
    def test_parse_number(self, value: str, expected: float | None) -> None:
        assert parse_number(value) == expected

    def test_js_number(self) -> None:
        assert js_number(16.0) == "16"
        assert js_number(2.5) == "2.5"
        assert js_number(0.1) == "0.1"


class TestColorEncodings:
    def test_swift_rgb(self) -> None:
        assert swift_rgb("#ffffff") == "red: 1.000, green: 1.000, blue: 1.000"
        assert swift_rgb("red") is None

    def test_argb_literal(self) -> None:
        assert argb_literal("#0ea5e9") == "0xFF0EA5E9"
        assert argb_literal("#fff") == "0xFFFFFFFF"
        assert argb_literal("transparent") is None
