from __future__ import annotations

from dataclasses import dataclass

"""Non-fatal diagnostics raised (as data) by the parser and normalizer.

Spreadsheet exports are hand-edited, so row-level problems are never fatal.
The core records them as Diagnostic values instead of raising; the
orchestrator decides whether to log them or write them to the error log.
"""

__all__ = [
    "CatalogWarning",
    "MalformedInputWarning",
    "InvalidNumericFieldWarning",
    "Diagnostic",
]


class CatalogWarning(UserWarning):
    """Base class for non-fatal catalog input problems."""
    error_type = "CATALOG_WARNING"


class MalformedInputWarning(CatalogWarning):
    """Unterminated quote or ragged row length."""
    error_type = "MALFORMED_INPUT"


class InvalidNumericFieldWarning(CatalogWarning):
    """Unparseable quantity / price; the value was defaulted to 0."""
    error_type = "INVALID_NUMERIC_FIELD"


@dataclass(frozen=True)
class Diagnostic:
    """One non-fatal problem found while loading a catalog.

    Attributes:
        row: 1-based source line of the offending row (-1 when unknown)
        category: Warning class describing the problem
        message: Human readable description
    """
    row: int
    category: type[CatalogWarning]
    message: str

    @property
    def error_type(self) -> str:
        return self.category.error_type

    def as_warning(self) -> CatalogWarning:
        return self.category(f"row {self.row}: {self.message}")
