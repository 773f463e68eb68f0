"""
Export format registry.

Adding a format means adding a backend module and one Exporter entry;
existing backends are untouched.
"""

from __future__ import annotations

from collections.abc import Iterable

from .backends import claude_md, css, flutter, json_tokens, kotlin, react_native, swift, tailwind
from .models import Exporter, UnknownFormatError

TEXT = "text/plain; charset=utf-8"

DEFAULT_EXPORTERS: tuple[Exporter, ...] = (
    Exporter("json", "JSON Tokens", "design-tokens.json", "application/json", json_tokens.render),
    Exporter("css", "CSS Variables", "design-tokens.css", TEXT, css.render),
    Exporter("tailwind", "Tailwind Config", "tailwind.config.ts", TEXT, tailwind.render),
    Exporter("swift", "Swift (SwiftUI)", "Theme.swift", TEXT, swift.render),
    Exporter("kotlin", "Kotlin (Compose)", "Theme.kt", TEXT, kotlin.render),
    Exporter("flutter", "Flutter (Dart)", "theme.dart", TEXT, flutter.render, bridge=False),
    Exporter("react-native", "React Native", "theme.ts", TEXT, react_native.render, bridge=False),
    Exporter("claude-md", "CLAUDE.md", "CLAUDE.md", TEXT, claude_md.render),
)


class ExporterRegistry:
    """Ordered map of format ID to Exporter."""

    def __init__(self, exporters: Iterable[Exporter] = DEFAULT_EXPORTERS) -> None:
        self._exporters: dict[str, Exporter] = {}
        for exporter in exporters:
            self.register(exporter)

    def register(self, exporter: Exporter) -> None:
        if exporter.id in self._exporters:
            raise ValueError(f"Duplicate export format: {exporter.id}")
        self._exporters[exporter.id] = exporter

    def get(self, format_id: str) -> Exporter:
        try:
            return self._exporters[format_id]
        except KeyError:
            raise UnknownFormatError(format_id) from None

    def ids(self, bridge_only: bool = False) -> list[str]:
        return [e.id for e in self._exporters.values() if e.bridge or not bridge_only]

    def __contains__(self, format_id: object) -> bool:
        return format_id in self._exporters

    def __iter__(self):
        return iter(self._exporters.values())


default_registry = ExporterRegistry()

ALL_FORMATS: tuple[str, ...] = tuple(default_registry.ids())
BRIDGE_FORMATS: tuple[str, ...] = tuple(default_registry.ids(bridge_only=True))
