"""Domain models for the card catalog pipeline.

This package contains the immutable value types shared by the parser,
normalizer, filter engine, layout engine and orchestrator.
"""

from .config_models import CatalogCapabilities, CatalogConfig, LayoutConfig
from .diagnostic import Diagnostic, InvalidNumericFieldWarning, MalformedInputWarning
from .filter_criteria import FilterCriteria, PriceBand
from .inventory_record import InventoryRecord, RecordStatus
from .visible_window import VisibleWindow

__all__ = [
    # Configuration models
    "CatalogCapabilities",
    "CatalogConfig",
    "LayoutConfig",
    # Pipeline models
    "Diagnostic",
    "FilterCriteria",
    "InventoryRecord",
    "InvalidNumericFieldWarning",
    "MalformedInputWarning",
    "PriceBand",
    "RecordStatus",
    "VisibleWindow",
]
