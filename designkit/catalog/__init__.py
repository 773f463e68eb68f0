"""
Static style catalog: categories, items, loading and integrity checks.
"""

from .categories import (
    CATEGORIES,
    CATEGORY_GROUPS,
    CategoryMeta,
    categories_by_group,
    categories_of_kind,
    get_category,
    is_known_category,
)
from .loader import DEFAULT_CATALOG_PATH, load_catalog, load_checked_catalog
from .models import Catalog
from .validation import validate_catalog

__all__ = [
    "Catalog",
    "CategoryMeta",
    "CATEGORIES",
    "CATEGORY_GROUPS",
    "DEFAULT_CATALOG_PATH",
    "categories_by_group",
    "categories_of_kind",
    "get_category",
    "is_known_category",
    "load_catalog",
    "load_checked_catalog",
    "validate_catalog",
]
