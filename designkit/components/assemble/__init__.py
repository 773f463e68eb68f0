"""
Assemble component - Selection state to DesignConfig.
"""

from .component import assemble, run
from .models import AssembleInput, AssembleOutput
from .ports import CatalogPort

__all__ = [
    "run",
    "assemble",
    "AssembleInput",
    "AssembleOutput",
    "CatalogPort",
]
