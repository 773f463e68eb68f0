"""
Export component - Render a DesignConfig into one or more target formats.

Backends are pure and never raise on a well-formed config. Lookup of an
unregistered format raises UnknownFormatError before anything renders.
"""

from __future__ import annotations

import io
import zipfile
from collections.abc import Iterable

from designkit.domain.entities import DesignConfig

from .models import ExportBundle, ExportInput, ExportOutput
from .registry import ExporterRegistry, default_registry

BUNDLE_FILE_NAME = "designkit-export.zip"


def export_format(
    config: DesignConfig,
    format_id: str,
    registry: ExporterRegistry = default_registry,
) -> str:
    return registry.get(format_id).render(config)


def generate_all_exports(
    config: DesignConfig,
    formats: Iterable[str] | None = None,
    registry: ExporterRegistry = default_registry,
) -> dict[str, str]:
    """
    Render several formats at once.

    Args:
        config: The resolved configuration
        formats: Format IDs, all registered formats when None
        registry: Exporter registry to look formats up in

    Returns:
        File name -> rendered content, in request order.
    """
    exporters = list(registry) if formats is None else [registry.get(f) for f in formats]
    return {exporter.file_name: exporter.render(config) for exporter in exporters}


def bundle_exports(
    config: DesignConfig,
    formats: Iterable[str],
    registry: ExporterRegistry = default_registry,
) -> ExportBundle:
    """
    Package the requested formats as a downloadable artifact.

    A single format is returned as its own file; two or more are zipped.
    """
    exporters = [registry.get(f) for f in dict.fromkeys(formats)]
    if not exporters:
        raise ValueError("At least one export format is required")

    if len(exporters) == 1:
        exporter = exporters[0]
        return ExportBundle(
            file_name=exporter.file_name,
            content=exporter.render(config).encode("utf-8"),
            media_type=exporter.media_type,
        )

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for exporter in exporters:
            archive.writestr(exporter.file_name, exporter.render(config))
    return ExportBundle(
        file_name=BUNDLE_FILE_NAME,
        content=buffer.getvalue(),
        media_type="application/zip",
    )


def run(inp: ExportInput, registry: ExporterRegistry = default_registry) -> ExportOutput:
    """Render the requested formats and the matching bundle."""
    files = generate_all_exports(inp.config, inp.formats, registry)
    bundle = bundle_exports(inp.config, inp.formats, registry) if inp.formats else None
    return ExportOutput(files=files, bundle=bundle)
