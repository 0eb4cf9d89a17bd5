from __future__ import annotations

from dataclasses import dataclass

"""InventoryRecord model for the card catalog pipeline.

An InventoryRecord is one normalized catalog item built from a single data row
of the spreadsheet export. Every logical field is always present: text fields
default to "" and numeric fields default to 0, so downstream filtering never
has to check for missing keys.

Records are created once per load cycle and replaced wholesale on the next
load; they are never mutated in place.
"""

__all__ = [
    "InventoryRecord",
    "RecordStatus",
    "DEFAULT_CATEGORY",
]

# 空カテゴリはフィルタ時に "Single" とみなす
DEFAULT_CATEGORY = "Single"


class RecordStatus:
    """Closed status vocabulary used by the storefront.

    The normalizer does not reject other values; they are passed through
    upper-cased and only the filter treats these three specially.
    """
    AVAILABLE = "AVAILABLE"
    HOLD = "HOLD"
    SOLD = "SOLD"


@dataclass(frozen=True)
class InventoryRecord:
    """One normalized catalog item.

    Attributes:
        name: Card name
        set: Expansion / set name
        number: Collector number inside the set (kept as text, e.g. "025/165")
        category: Product category ("" when the export has no category column)
        rarity: Rarity label as entered in the sheet
        condition: Condition label (NM, LP, ...)
        quantity: Units in stock, 0 when missing or unparseable
        price: Price in store currency, 0 when missing or unparseable
        status: Upper-cased status (AVAILABLE / HOLD / SOLD / other)
        image: Resolved thumbnail reference (image_direct, else image_url)
        notes: Free text notes
        image_large: Zoom image reference, falls back to ``image``
        row_number: Source line of the row (header = 1), 0 when built by hand
    """
    name: str = ""
    set: str = ""
    number: str = ""
    category: str = ""
    rarity: str = ""
    condition: str = ""
    quantity: float = 0.0
    price: float = 0.0
    status: str = ""
    image: str = ""
    notes: str = ""
    image_large: str = ""
    row_number: int = 0

    @property
    def effective_category(self) -> str:
        """Trimmed category with the DEFAULT_CATEGORY applied to blanks."""
        return self.category.strip() or DEFAULT_CATEGORY

    @property
    def is_available(self) -> bool:
        return self.status == RecordStatus.AVAILABLE
