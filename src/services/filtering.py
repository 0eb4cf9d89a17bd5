from __future__ import annotations

import math
from collections.abc import Iterable

from ..models.config_models import CatalogCapabilities
from ..models.filter_criteria import ALL_CATEGORIES, STATUS_ALL_UNSOLD, FilterCriteria, PriceBand
from ..models.inventory_record import InventoryRecord, RecordStatus

"""Filter engine for the storefront search controls.

apply_filters() is a pure function of (records, criteria, capabilities): it
never mutates its input and returns a new list. Active filters combine with
AND; input order is kept unless the capability set asks for a price sort, in
which case a stable ascending sort is applied.
"""

__all__ = [
    "DEFAULT_CAPABILITIES",
    "apply_filters",
    "matches",
    "classify_price_band",
    "price_in_band",
    "classify_badge",
    "BADGE_STANDARD",
]

DEFAULT_CAPABILITIES = CatalogCapabilities()

BADGE_STANDARD = "Standard"


def apply_filters(
    records: Iterable[InventoryRecord],
    criteria: FilterCriteria,
    capabilities: CatalogCapabilities = DEFAULT_CAPABILITIES,
) -> list[InventoryRecord]:
    """Return the records matching ``criteria``.

    Args:
        records: Normalized record set (not modified)
        criteria: Snapshot of the filter controls
        capabilities: Variant switches (categories, stock, price sort)

    Returns:
        New list of matching records; empty when nothing matches
    """
    query = criteria.query.lower()
    result = [r for r in records if matches(r, criteria, capabilities, query=query)]
    if capabilities.sort_by_price:
        # sorted() は安定ソート: 同価格は元の順序を保持
        result = sorted(result, key=_price_sort_key)
    return result


def matches(
    record: InventoryRecord,
    criteria: FilterCriteria,
    capabilities: CatalogCapabilities = DEFAULT_CAPABILITIES,
    *,
    query: str | None = None,
) -> bool:
    """Evaluate every active filter against a single record."""
    if query is None:
        query = criteria.query.lower()
    return (
        _match_status(record, criteria.status, capabilities)
        and _match_category(record, criteria.category, capabilities)
        and _match_query(record, query, capabilities)
        and _match_band(record, criteria.price_band)
    )


def _match_status(record: InventoryRecord, status: str, capabilities: CatalogCapabilities) -> bool:
    if not status:
        return True
    if status == RecordStatus.AVAILABLE:
        if record.status != RecordStatus.AVAILABLE:
            return False
        return record.quantity > 0 if capabilities.requires_stock else True
    if status == STATUS_ALL_UNSOLD:
        return record.status != RecordStatus.SOLD
    return record.status == status


def _match_category(record: InventoryRecord, category: str, capabilities: CatalogCapabilities) -> bool:
    if not capabilities.supports_categories or not category or category == ALL_CATEGORIES:
        return True
    return record.effective_category == category.strip()


def _match_query(record: InventoryRecord, query: str, capabilities: CatalogCapabilities) -> bool:
    if not query:
        return True
    haystack = [record.name, record.set, record.rarity]
    if capabilities.supports_categories:
        haystack.append(record.category)
    return any(query in field.lower() for field in haystack)


def _match_band(record: InventoryRecord, token: str) -> bool:
    if not token:
        return True
    return price_in_band(record.price, token)


def _price_sort_key(record: InventoryRecord) -> float:
    # NaN は比較不能なので末尾へ
    return record.price if math.isfinite(record.price) else math.inf


def price_in_band(price: float, token: str) -> bool:
    """True when ``price`` falls inside the band named by ``token``.

    Unknown tokens and non-finite prices never match.
    """
    band = PriceBand.from_token(token)
    if band is None:
        return False
    return band.contains(price)


def classify_price_band(price: float) -> PriceBand | None:
    """Return the single band containing ``price`` or None (gap / non-finite)."""
    for band in PriceBand:
        if band.contains(price):
            return band
    return None


def classify_badge(price: float) -> str:
    """Price badge text shown on a card.

    ``≤1`` / ``≤3`` / ``≤5`` / ``≥20`` for the cheap and premium tiers,
    ``Standard`` for everything else (including prices between bands such as
    3.5, zero and non-finite prices). Presentational only, not a filter.
    """
    if not math.isfinite(price) or price <= 0:
        return BADGE_STANDARD
    if price <= 1:
        return "≤1"
    if price <= 3:
        return "≤3"
    if 4 <= price <= 5:
        return "≤5"
    if price >= 20:
        return "≥20"
    return BADGE_STANDARD
