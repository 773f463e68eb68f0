"""
Export component - Multi-format rendering of the resolved DesignConfig.
"""

from .component import BUNDLE_FILE_NAME, bundle_exports, export_format, generate_all_exports, run
from .flatten import (
    argb_literal,
    camel_to_kebab,
    flatten_tokens,
    format_token_value,
    js_number,
    kotlin_color,
    parse_number,
    swift_rgb,
)
from .models import (
    ExportBundle,
    Exporter,
    ExportInput,
    ExportOutput,
    TokenEntry,
    TokenFormat,
    UnknownFormatError,
)
from .registry import ALL_FORMATS, BRIDGE_FORMATS, DEFAULT_EXPORTERS, ExporterRegistry, default_registry

__all__ = [
    # Component entry points
    "run",
    "export_format",
    "generate_all_exports",
    "bundle_exports",
    # Models
    "Exporter",
    "ExportBundle",
    "ExportInput",
    "ExportOutput",
    "TokenEntry",
    "TokenFormat",
    "UnknownFormatError",
    # Registry
    "ExporterRegistry",
    "default_registry",
    "DEFAULT_EXPORTERS",
    "ALL_FORMATS",
    "BRIDGE_FORMATS",
    # Token browser
    "flatten_tokens",
    "format_token_value",
    # Helpers
    "camel_to_kebab",
    "parse_number",
    "js_number",
    "swift_rgb",
    "argb_literal",
    "kotlin_color",
    # Constants
    "BUNDLE_FILE_NAME",
]
