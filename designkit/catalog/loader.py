import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from designkit.catalog.models import Catalog
from designkit.catalog.validation import validate_catalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


def load_catalog(path: Path | None = None) -> Catalog:
    """
    Load and validate a catalog file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    path = path or DEFAULT_CATALOG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in catalog file: {e}") from e

    try:
        catalog = Catalog.model_validate(data or {})
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Catalog validation failed:\n{e}") from e

    logger.info("Catalog loaded from %s (%d categories)", path, len(catalog.categories()))
    return catalog


def load_checked_catalog(path: Path | None = None) -> Catalog:
    """
    Load a catalog and run integrity checks.
    Raises ValueError listing every problem if the catalog is inconsistent.
    """
    catalog = load_catalog(path)
    errors = validate_catalog(catalog)
    if errors:
        details = "\n".join(f"  {e.field}: {e.message}" for e in errors)
        raise ValueError(f"Catalog integrity check failed:\n{details}")
    return catalog
