"""
Unit tests for the export backends, registry and bundling.
"""

import io
import json
import re
import zipfile

import pytest

from designkit.components.assemble import assemble
from designkit.components.colors import resolve_colors
from designkit.components.export import (
    ALL_FORMATS,
    BRIDGE_FORMATS,
    BUNDLE_FILE_NAME,
    ExportInput,
    Exporter,
    ExporterRegistry,
    UnknownFormatError,
    bundle_exports,
    export_format,
    generate_all_exports,
    run,
)
from designkit.components.export.backends import (
    claude_md,
    css,
    flutter,
    json_tokens,
    kotlin,
    react_native,
    swift,
    tailwind,
)
from designkit.domain.entities import ColorOverrides, DesignConfig, TokenSet


class TestJson:
    def test_round_trips_config(self, full_config) -> None:
        """The JSON export parses back to the same config."""
        data = json.loads(json_tokens.render(full_config))
        assert DesignConfig.model_validate(data) == full_config

    def test_camel_case_keys(self, full_config) -> None:
        data = json.loads(json_tokens.render(full_config))
        assert data["colorPicks"] == {"light": {"accent": "#ff00aa"}, "dark": {}}
        assert data["tokens"]["colors"]["light"]["textSecondary"] == "#475569"
        assert data["componentPreferences"]["buttons"]["style"]["css"]["root"]["hover"] == {
            "__hoverBg": "primary-10"
        }

    def test_typography_only_has_no_colors_key(self, catalog) -> None:
        """Only typography selected: tokens.colors is absent, not null or empty."""
        config = assemble({"typography": "inter"}, ColorOverrides(), "default", catalog).config
        tokens = json.loads(json_tokens.render(config))["tokens"]
        assert "colors" not in tokens
        assert tokens["typography"]["headingFont"] == "Inter"

    def test_empty_config_omits_groups(self, empty_config) -> None:
        data = json.loads(json_tokens.render(empty_config))
        assert data["tokens"] == {}
        assert data["componentPreferences"] == {}


class TestCss:
    @pytest.fixture
    def output(self, full_config) -> str:
        return css.render(full_config)

    def test_header(self, output) -> None:
        assert output.startswith("/* DesignKit — Generated CSS Custom Properties */")

    def test_light_colors(self, output) -> None:
        assert "  --color-primary: #0ea5e9;" in output
        assert "  --color-accent: #ff00aa;" in output
        assert "  --color-text-secondary: #475569;" in output
        assert "  --color-semantic-success: #16a34a;" in output

    def test_dark_colors_in_media_query(self, output) -> None:
        media = output.index("@media (prefers-color-scheme: dark) {")
        assert output.index("    --color-primary: #38bdf8;") > media

    def test_typography(self, output) -> None:
        assert "  --font-heading: 'Inter', sans-serif;" in output
        assert "  --font-mono: 'JetBrains Mono', monospace;" in output
        assert "  --text-h1-size: 2.5rem;" in output
        assert "  --text-body-small-line-height: 1.2rem;" in output

    def test_scalar_groups(self, output) -> None:
        assert "  --space-4: 16px;" in output
        assert "  --radius-2xl: 24px;" in output
        assert "  --shadow-none: none;" in output

    def test_animation(self, output) -> None:
        assert "  --ease-button: cubic-bezier(0.25, 0.46, 0.45, 0.94);" in output
        assert "  --duration-hover: 200ms;" in output
        assert "@keyframes dk-btn-scale-down {" in output

    def test_component_classes(self, output) -> None:
        assert ".dk-btn {\n  padding: 10px 20px;" in output
        assert "  border: 1px solid #0ea5e9;" in output
        assert ".dk-btn:hover {\n  background-color: rgba(14,165,233,0.1);\n}" in output
        assert ".dk-btn:active {\n  background-color: rgba(14,165,233,0.2);\n}" in output
        assert ".dk-btn:disabled {" in output

    def test_state_selectors(self, output) -> None:
        assert ".dk-input:focus {" in output
        assert "  box-shadow: 0 0 0 3px rgba(14,165,233,0.2);" in output
        assert ".dk-input.filled {" in output
        assert ".dk-input.error {" in output
        assert "  box-shadow: 0 0 0 3px rgba(220,38,38,0.15);" in output

    def test_part_classes(self, output) -> None:
        assert ".dk-tabs {" in output
        assert ".dk-tabs-item:hover {" in output
        assert ".dk-card:hover {\n  border-color: rgba(14,165,233,0.3);\n}" in output

    def test_no_unexpanded_tokens(self, output) -> None:
        assert "__" not in output

    def test_empty_config(self, empty_config) -> None:
        """Nothing selected: only the header."""
        output = css.render(empty_config)
        assert ":root" not in output
        assert "Component Styles" not in output

    def test_components_without_colors_use_defaults(self, catalog) -> None:
        config = assemble({"buttons": "thin-outline"}, ColorOverrides(), "default", catalog).config
        output = css.render(config)
        assert "  border: 1px solid #3b82f6;" in output
        assert "--color-primary" not in output


class TestTailwind:
    def test_structure(self, full_config) -> None:
        output = tailwind.render(full_config)
        assert output.startswith('import type { Config } from "tailwindcss";')
        assert "export default config;" in output

    def test_theme(self, full_config) -> None:
        theme = tailwind.build_theme(full_config)
        assert theme["colors"]["primary"] == {"DEFAULT": "#0ea5e9", "foreground": "#ffffff"}
        assert theme["colors"]["foreground"] == "#0f172a"
        assert theme["borderRadius"]["2xl"] == "24px"
        assert theme["spacing"]["4"] == "16px"
        assert theme["fontFamily"]["mono"] == ["'JetBrains Mono'", "monospace"]
        assert theme["fontSize"]["h1"] == ["2.5rem", {"lineHeight": "3rem", "fontWeight": "700"}]

    def test_animation_only_with_keyframes(self, full_config) -> None:
        """lift-shadow has no keyframes, so only the press animation is listed."""
        theme = tailwind.build_theme(full_config)
        assert theme["animation"] == {
            "button": "dk-btn-scale-down 150ms cubic-bezier(0.25, 0.46, 0.45, 0.94)"
        }

    def test_ts_keys_quoted_when_needed(self, full_config) -> None:
        output = tailwind.render(full_config)
        assert '"2xl": "24px",' in output
        assert "DEFAULT: \"#0ea5e9\"," in output

    def test_keyframes_comment(self, full_config) -> None:
        output = tailwind.render(full_config)
        assert " * Add these @keyframes to your global CSS:" in output
        assert " * @keyframes dk-btn-scale-down {" in output

    def test_empty_config(self, empty_config) -> None:
        output = tailwind.render(empty_config)
        assert "    extend: {}," in output
        assert "@keyframes" not in output


class TestSwift:
    @pytest.fixture
    def output(self, full_config) -> str:
        return swift.render(full_config)

    def test_header(self, output) -> None:
        assert output.startswith("// DesignKit — Generated Swift Theme\nimport SwiftUI")

    def test_adaptive_colors(self, output) -> None:
        assert "        static let primary = Color(UIColor { tc in" in output
        assert "? UIColor(red: 0.220, green: 0.741, blue: 0.973, alpha: 1)" in output
        assert ": UIColor(red: 0.055, green: 0.647, blue: 0.914, alpha: 1)" in output

    def test_fonts(self, output) -> None:
        assert '        static let headingFamily = "Inter"' in output
        assert "        static let h1 = Font.custom(headingFamily, size: 2.5)" in output
        assert "        static let body = Font.custom(bodyFamily, size: 1)" in output

    def test_dimensions(self, output) -> None:
        assert "    static let _4: CGFloat = 16" in output
        assert "    static let _2xl: CGFloat = 24" in output

    def test_design_tokens(self, output) -> None:
        assert "    static let colorsLightPrimary = Color(red: 0.055, green: 0.647, blue: 0.914)" in output
        assert '    static let typographyScaleH1Size = "2.5rem"' in output
        assert '    static let spacing4 = "16px"' in output

    def test_no_dollar_escape(self) -> None:
        """Swift does not interpolate $, so it stays unescaped."""
        config = DesignConfig(tokens=TokenSet(shadows={"price": "$5"}))
        assert 'static let price = "$5"' in swift.render(config)

    def test_non_hex_color_commented(self) -> None:
        colors = resolve_colors(ColorOverrides(light={"primary": "oklch(0.6 0.2 250)"}))
        output = swift.render(DesignConfig(tokens=TokenSet(colors=colors)))
        assert "        // primary: not a hex color" in output
        assert 'static let colorsLightPrimary = "oklch(0.6 0.2 250)"' in output


class TestKotlin:
    @pytest.fixture
    def output(self, full_config) -> str:
        return kotlin.render(full_config)

    def test_header(self, output) -> None:
        assert "package com.app.theme" in output
        assert "import androidx.compose.ui.graphics.Color" in output

    def test_color_objects(self, output) -> None:
        light = output.index("object LightColors {")
        dark = output.index("object DarkColors {")
        assert output.index("    val Primary = Color(0xFF0EA5E9)") > light
        assert output.index("    val Primary = Color(0xFF38BDF8)") > dark

    def test_scheme(self, output) -> None:
        assert "            primary = DarkColors.Primary," in output
        assert "            primary = LightColors.Primary," in output

    def test_typography(self, output) -> None:
        assert '    const val HeadingFamily = "Inter"' in output
        assert "    val h1 = 2.5.sp" in output

    def test_dimensions(self, output) -> None:
        assert "    val _4 = 16.dp" in output
        assert "    val full = 9999.dp" in output
        assert '    const val sm = "0 1px 2px rgba(0,0,0,0.05)"' in output

    def test_design_tokens(self, output) -> None:
        assert "    val ColorsLightPrimary = Color(0xFF0EA5E9)" in output
        assert '    const val Spacing4 = "16px"' in output

    def test_dollar_escaped(self) -> None:
        config = DesignConfig(tokens=TokenSet(shadows={"price": "$5"}))
        assert 'const val price = "\\$5"' in kotlin.render(config)


class TestFlutter:
    @pytest.fixture
    def output(self, full_config) -> str:
        return flutter.render(full_config)

    def test_schemes(self, output) -> None:
        assert "  static const lightScheme = ColorScheme.light(" in output
        assert "    primary: Color(0xFF0EA5E9)," in output
        assert "    onSurface: Color(0xFF0F172A)," in output

    def test_text_theme(self, output) -> None:
        assert (
            "    displayLarge: TextStyle(fontFamily: headingFamily, fontSize: 2.5, "
            "fontWeight: FontWeight.w700, height: 3)," in output
        )
        assert "    labelLarge: TextStyle(fontFamily: bodyFamily" in output
        assert "overline" not in output

    def test_dimensions(self, output) -> None:
        assert "  static const double _4 = 16;" in output

    def test_theme_functions(self, output) -> None:
        assert "ThemeData lightTheme() => ThemeData(\n  colorScheme: AppColors.lightScheme," in output

    def test_empty_config(self, empty_config) -> None:
        output = flutter.render(empty_config)
        assert "class AppColors" not in output
        assert "ThemeData darkTheme() => ThemeData(\n);" in output


class TestReactNative:
    @pytest.fixture
    def output(self, full_config) -> str:
        return react_native.render(full_config)

    def test_colors(self, output) -> None:
        assert '    primary: "#0ea5e9",' in output
        assert '    success: "#22c55e",' in output

    def test_typography(self, output) -> None:
        assert '    h1: { fontSize: 2.5, lineHeight: 8, fontWeight: "700" as const },' in output

    def test_numbers(self, output) -> None:
        assert '  "4": 16,' in output
        assert '  "2xl": 24,' in output
        assert "  md: 8," in output

    def test_theme(self, output) -> None:
        assert output.endswith(
            "export const theme = {\n  colors,\n  typography,\n  spacing,\n  radius,\n  shadows,\n} as const;\n"
        )

    def test_empty_config(self, empty_config) -> None:
        assert "export const theme = {\n} as const;" in react_native.render(empty_config)


class TestClaudeMd:
    @pytest.fixture
    def output(self, full_config) -> str:
        return claude_md.render(full_config)

    def test_header(self, output) -> None:
        assert output.startswith("# Design System — Generated by DesignKit\n")

    def test_colors(self, output) -> None:
        assert "### Light Mode\n- Background: #ffffff" in output
        assert "- Accent: #ff00aa" in output
        assert "### Dark Mode\n- Background: #020617" in output

    def test_typography_and_spacing(self, output) -> None:
        assert "- Scale ratio: 1.2 (Default)" in output
        assert "- Base unit: 4px" in output
        assert "  - 4: 16px" in output

    def test_component_section(self, output) -> None:
        assert "## Buttons: Thin Outline" in output
        assert "- Color strategy: outline (bg=transparent, text=primary, border=primary)" in output
        assert "- Supports sizes: sm, md, lg" in output
        assert "- Supports icons: yes" in output

    def test_raw_css(self, output) -> None:
        """Component CSS keeps its token expressions."""
        assert "border: 1px solid __primary;" in output
        assert "/* item: hover */" in output

    def test_motion(self, output) -> None:
        assert "## Motion & Animation" in output
        assert "### Button Press: Scale Down" in output
        assert "- Trigger: click" in output
        assert "transform: translateY(-2px);" in output

    def test_humanize(self) -> None:
        assert claude_md.humanize("hasFloatingLabel") == "Has floating label"

    def test_empty_config(self, empty_config) -> None:
        output = claude_md.render(empty_config)
        assert "## Colors" not in output
        assert "## Motion" not in output


class TestRegistry:
    def test_all_formats(self) -> None:
        assert ALL_FORMATS == (
            "json",
            "css",
            "tailwind",
            "swift",
            "kotlin",
            "flutter",
            "react-native",
            "claude-md",
        )

    def test_bridge_formats(self) -> None:
        assert "flutter" not in BRIDGE_FORMATS
        assert "react-native" not in BRIDGE_FORMATS
        assert "claude-md" in BRIDGE_FORMATS

    def test_unknown_format(self, full_config) -> None:
        with pytest.raises(UnknownFormatError) as exc:
            export_format(full_config, "yaml")
        assert str(exc.value) == "Unknown format: yaml"

    def test_duplicate_rejected(self) -> None:
        registry = ExporterRegistry()
        with pytest.raises(ValueError):
            registry.register(registry.get("json"))

    def test_custom_exporter(self, empty_config) -> None:
        """New formats plug in without touching existing backends."""
        registry = ExporterRegistry(
            [Exporter("txt", "Text", "tokens.txt", "text/plain", lambda c: c.name)]
        )
        assert "txt" in registry
        assert export_format(empty_config, "txt", registry) == "DesignKit Export"
        assert registry.get("txt").extension == ".txt"

    @pytest.mark.parametrize("format_id", ALL_FORMATS)
    def test_every_backend_handles_empty_config(self, empty_config, format_id: str) -> None:
        assert isinstance(export_format(empty_config, format_id), str)


class TestBundling:
    def test_generate_all(self, full_config) -> None:
        files = generate_all_exports(full_config)
        assert list(files) == [
            "design-tokens.json",
            "design-tokens.css",
            "tailwind.config.ts",
            "Theme.swift",
            "Theme.kt",
            "theme.dart",
            "theme.ts",
            "CLAUDE.md",
        ]

    def test_single_format_is_plain_file(self, full_config) -> None:
        bundle = bundle_exports(full_config, ["css"])
        assert bundle.file_name == "design-tokens.css"
        assert bundle.content.decode("utf-8") == css.render(full_config)

    def test_several_formats_zipped(self, full_config) -> None:
        bundle = bundle_exports(full_config, ["json", "swift", "json"])
        assert bundle.file_name == BUNDLE_FILE_NAME
        assert bundle.media_type == "application/zip"
        with zipfile.ZipFile(io.BytesIO(bundle.content)) as archive:
            assert archive.namelist() == ["design-tokens.json", "Theme.swift"]
            assert archive.read("Theme.swift").decode("utf-8") == swift.render(full_config)

    def test_no_formats(self, full_config) -> None:
        with pytest.raises(ValueError):
            bundle_exports(full_config, [])

    def test_unknown_format_before_render(self, full_config) -> None:
        with pytest.raises(UnknownFormatError):
            bundle_exports(full_config, ["css", "pdf"])

    def test_run(self, full_config) -> None:
        out = run(ExportInput(config=full_config, formats=("css", "kotlin")))
        assert set(out.files) == {"design-tokens.css", "Theme.kt"}
        assert out.bundle.file_name == BUNDLE_FILE_NAME


class TestWellFormedOutput:
    """Every declaration line in the native backends parses as its target syntax."""

    CSS_DECLARATION = re.compile(r"^--[a-z0-9-]+: [^;{}]+;$")
    SWIFT_CONSTANT = re.compile(
        r"^static let [A-Za-z_]\w*(: CGFloat)? = ("
        r"-?\d+(\.\d+)?"
        r"|Color\(red: \d\.\d{3}, green: \d\.\d{3}, blue: \d\.\d{3}\)"
        r"|Color\(UIColor \{ tc in"
        r"|Font\.custom\((headingFamily|bodyFamily), size: \d+(\.\d+)?\)"
        r'|"(?:[^"\\]|\\.)*"'
        r")$"
    )
    KOTLIN_CONSTANT = re.compile(
        r"^(const )?val [A-Za-z_]\w* = ("
        r"Color\(0xFF[0-9A-F]{6}\)"
        r"|-?\d+(\.\d+)?\.(sp|dp)"
        r'|"(?:[^"\\$]|\\.)*"'
        r")$"
    )

    @pytest.fixture(params=["full", "non_hex"])
    def config(self, request, full_config) -> DesignConfig:
        if request.param == "full":
            return full_config
        colors = resolve_colors(ColorOverrides(light={"primary": "oklch(0.6 0.2 250)"}))
        return full_config.model_copy(update={"tokens": TokenSet(colors=colors)})

    def test_css_root_blocks(self, config) -> None:
        declarations = 0
        inside = False
        for line in css.render(config).splitlines():
            stripped = line.strip()
            if stripped == ":root {":
                inside = True
            elif stripped == "}" and inside:
                inside = False
            elif inside:
                assert self.CSS_DECLARATION.match(stripped), line
                declarations += 1
        assert declarations > 0

    def test_swift_constants(self, config) -> None:
        output = swift.render(config)
        constants = [line.strip() for line in output.splitlines() if "static let " in line]
        assert constants
        for line in constants:
            assert self.SWIFT_CONSTANT.match(line), line
        assert output.count("{") == output.count("}")

    def test_kotlin_constants(self, config) -> None:
        output = kotlin.render(config)
        constants = [
            line.strip()
            for line in output.splitlines()
            if line.strip().startswith(("val ", "const val "))
        ]
        assert constants
        for line in constants:
            assert self.KOTLIN_CONSTANT.match(line), line
        assert output.count("{") == output.count("}")
