from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

"""FilterCriteria and PriceBand models.

FilterCriteria is an immutable snapshot of the storefront input controls. It is
re-created whenever any control changes and lives for a single filter run.

PriceBand is the closed set of named price intervals offered by the price
select box. Bands are deliberately gapped (3.5 falls between ``1-3`` and
``4-5``) because shop prices are whole units; a gapped price matches no band.
"""

__all__ = [
    "FilterCriteria",
    "PriceBand",
    "ALL_CATEGORIES",
    "STATUS_ALL_UNSOLD",
]

# カテゴリ select の "全て" センチネル
ALL_CATEGORIES = "All"

# Status token meaning "everything except SOLD"
STATUS_ALL_UNSOLD = "ALL"


class PriceBand(Enum):
    """Named price intervals: (token, low, high, low_inclusive, high_inclusive)."""
    UP_TO_3 = ("1-3", 0.0, 3.0, False, True)
    FROM_4_TO_5 = ("4-5", 4.0, 5.0, True, True)
    FROM_6_TO_10 = ("6-10", 6.0, 10.0, True, True)
    FROM_11_TO_25 = ("11-25", 11.0, 25.0, True, True)
    FROM_26_TO_50 = ("26-50", 26.0, 50.0, True, True)
    OVER_50 = ("50+", 50.0, math.inf, False, False)

    def __init__(self, token: str, low: float, high: float, low_inclusive: bool, high_inclusive: bool) -> None:
        self.token = token
        self.low = low
        self.high = high
        self.low_inclusive = low_inclusive
        self.high_inclusive = high_inclusive

    def contains(self, price: float) -> bool:
        """Return True when ``price`` lies inside this band.

        Non-finite prices (NaN, +/-inf) never match any band.
        """
        if not math.isfinite(price):
            return False
        above = price >= self.low if self.low_inclusive else price > self.low
        below = price <= self.high if self.high_inclusive else price < self.high
        return above and below

    @classmethod
    def from_token(cls, token: str) -> PriceBand | None:
        """Look up a band by its select-box token; None for unknown tokens."""
        for band in cls:
            if band.token == token:
                return band
        return None


@dataclass(frozen=True)
class FilterCriteria:
    """Snapshot of the search / filter controls.

    Attributes:
        query: Free text search; matched case-insensitively as a substring
        price_band: PriceBand token ("" = no price filtering)
        status: "" (no preference), "AVAILABLE", "ALL" (unsold) or an exact status
        category: Category token ("" or "All" = no category filtering)
    """
    query: str = ""
    price_band: str = ""
    status: str = ""
    category: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.query or self.price_band or self.status or self.category)
