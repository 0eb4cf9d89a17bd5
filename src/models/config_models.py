from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the card catalog pipeline.

These are the typed domain models produced by src/config/loader.py. The
storefront used to ship several near-identical app variants (with / without
categories, with / without stock quantity); CatalogCapabilities replaces them
with one explicit capability set passed into the filter engine.
"""

__all__ = [
    "CatalogCapabilities",
    "LayoutConfig",
    "CatalogConfig",
]


@dataclass(frozen=True)
class CatalogCapabilities:
    """Feature switches for one storefront variant.

    ``available_requires_quantity`` resolves the "only available" ambiguity:
    when the variant tracks stock (``supports_quantity``) an AVAILABLE record
    with quantity 0 can be excluded or kept.
    """
    supports_categories: bool = False
    supports_quantity: bool = False
    available_requires_quantity: bool = True
    sort_by_price: bool = False  # 価格昇順 (安定ソート)

    @property
    def requires_stock(self) -> bool:
        return self.supports_quantity and self.available_requires_quantity


@dataclass(frozen=True)
class LayoutConfig:
    """Card footprint and default viewport for the virtual grid.

    All values share one caller-defined linear unit (pixels in the storefront).
    """
    item_width: float = 200
    item_height: float = 260
    gap: float = 12
    viewport_width: float = 800
    viewport_height: float = 600


@dataclass(frozen=True)
class CatalogConfig:
    """Root configuration object for a catalog run."""
    sources: list[str]  # CSV exports, one load cycle each
    capabilities: CatalogCapabilities = field(default_factory=CatalogCapabilities)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    encoding: str = "utf-8"
