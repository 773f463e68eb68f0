"""
Export component models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Literal

from designkit.domain.entities import DesignConfig

TokenFormat = Literal["css", "js", "swift", "kotlin"]


class UnknownFormatError(KeyError):
    """Raised when an export format is not registered."""

    def __init__(self, format_id: str) -> None:
        super().__init__(format_id)
        self.format_id = format_id

    def __str__(self) -> str:
        return f"Unknown format: {self.format_id}"


@dataclass(frozen=True)
class Exporter:
    """
    One output format.

    render must be pure and must not raise; missing optional token groups
    are omitted from the output.
    """

    id: str
    label: str
    file_name: str
    media_type: str
    render: Callable[[DesignConfig], str]
    # Reachable through the HTTP bridge, not only the in-app exporter
    bridge: bool = True

    @property
    def extension(self) -> str:
        return PurePosixPath(self.file_name).suffix


@dataclass(frozen=True)
class TokenEntry:
    """One leaf of the flattened token tree."""

    path: str
    value: str
    group: str

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.path.split("."))

    @property
    def key(self) -> str:
        return self.segments[-1]

    @property
    def is_color(self) -> bool:
        return self.path.startswith("colors.")


@dataclass(frozen=True)
class ExportBundle:
    """A downloadable artifact: a single file or a zip of several."""

    file_name: str
    content: bytes
    media_type: str


# --- Input/Output Models ---


@dataclass(frozen=True)
class ExportInput:
    config: DesignConfig
    formats: tuple[str, ...] = ("json",)


@dataclass(frozen=True)
class ExportOutput:
    # file name -> content
    files: dict[str, str] = field(default_factory=dict)
    bundle: ExportBundle | None = None
