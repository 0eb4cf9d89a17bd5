from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from ..models.diagnostic import Diagnostic, InvalidNumericFieldWarning, MalformedInputWarning
from ..models.inventory_record import InventoryRecord

"""Record normalizer: parsed rows -> InventoryRecord list.

- 1行目をヘッダ行 (小文字化・trim) として扱い、2行目以降をデータ行とする
- 全セル空の行はスキップ
- qty / price_bnd は pandas.to_numeric(errors="coerce") で数値化し、変換不能は 0
- status は大文字化のみ (語彙チェックはフィルタ側)

The normalizer is total over arbitrary spreadsheet content: the only failure
is a structurally empty input (no rows, or a header row without any column
names), which raises MissingHeaderError.
"""

__all__ = [
    "MissingHeaderError",
    "NormalizeResult",
    "build_header_map",
    "normalize",
    "normalize_with_diagnostics",
]

# Spreadsheet column -> InventoryRecord text field
TEXT_COLUMNS = {
    "name": "name",
    "set": "set",
    "number": "number",
    "category": "category",
    "rarity": "rarity",
    "condition": "condition",
    "status": "status",
    "notes": "notes",
}
NUMERIC_COLUMNS = {
    "qty": "quantity",
    "price_bnd": "price",
}
IMAGE_DIRECT_COLUMN = "image_direct"
IMAGE_URL_COLUMN = "image_url"
IMAGE_LARGE_COLUMN = "image_large_url"

RECOGNIZED_COLUMNS = frozenset(
    [*TEXT_COLUMNS, *NUMERIC_COLUMNS, IMAGE_DIRECT_COLUMN, IMAGE_URL_COLUMN, IMAGE_LARGE_COLUMN]
)


class MissingHeaderError(Exception):
    """Raised when the input has no rows or the header row has no column names."""


@dataclass(frozen=True)
class NormalizeResult:
    records: list[InventoryRecord]
    header: list[str]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def build_header_map(header_row: Sequence[str]) -> list[str]:
    """Lower-case and trim the header cells.

    Raises:
        MissingHeaderError: if no header cell has a name
    """
    header = [str(c).strip().lower() for c in header_row]
    if not any(header):
        raise MissingHeaderError("header row has no column names")
    return header


def normalize(rows: Sequence[Sequence[str]]) -> list[InventoryRecord]:
    """Build InventoryRecords from parsed rows (first row = header)."""
    return normalize_with_diagnostics(rows).records


def normalize_with_diagnostics(rows: Sequence[Sequence[str]]) -> NormalizeResult:
    """Build InventoryRecords and collect non-fatal diagnostics.

    Steps:
    1. Validate at least one row exists and derive the HeaderMap from it
    2. Drop data rows without any non-empty cell
    3. Zip header names to cells by position (absent cells read as "")
    4. Coerce numeric columns in one vectorized pass, defaulting to 0
    """
    if not rows:
        raise MissingHeaderError("no rows in input")
    header = build_header_map(rows[0])
    diagnostics: list[Diagnostic] = []

    cells: list[dict[str, str]] = []
    row_numbers: list[int] = []
    for index, raw in enumerate(rows[1:], start=2):
        if not any(str(c).strip() for c in raw):
            continue
        if len(raw) != len(header):
            diagnostics.append(
                Diagnostic(
                    row=index,
                    category=MalformedInputWarning,
                    message=f"row has {len(raw)} cells, header has {len(header)}",
                )
            )
        row_dict: dict[str, str] = {}
        for position, col in enumerate(header):
            # 重複列名は先勝ち
            if not col or col in row_dict:
                continue
            row_dict[col] = str(raw[position]).strip() if position < len(raw) else ""
        cells.append(row_dict)
        row_numbers.append(index)

    numeric = {
        column: _coerce_numeric(column, [c.get(column, "") for c in cells], row_numbers, diagnostics)
        for column in NUMERIC_COLUMNS
    }

    records: list[InventoryRecord] = []
    for position, row_dict in enumerate(cells):
        values: dict[str, object] = {
            attr: row_dict.get(column, "") for column, attr in TEXT_COLUMNS.items()
        }
        values["status"] = str(values["status"]).upper()
        for column, attr in NUMERIC_COLUMNS.items():
            values[attr] = numeric[column][position]
        image = row_dict.get(IMAGE_DIRECT_COLUMN) or row_dict.get(IMAGE_URL_COLUMN) or ""
        values["image"] = image
        values["image_large"] = row_dict.get(IMAGE_LARGE_COLUMN) or image
        records.append(InventoryRecord(row_number=row_numbers[position], **values))  # type: ignore[arg-type]

    return NormalizeResult(records=records, header=header, diagnostics=diagnostics)


def _coerce_numeric(
    column: str,
    raw_values: list[str],
    row_numbers: list[int],
    diagnostics: list[Diagnostic],
) -> list[float]:
    """Convert one numeric column; unparseable or non-finite values become 0.

    Blank cells default silently. Anything else that fails conversion is
    reported as an InvalidNumericFieldWarning diagnostic.
    """
    if not raw_values:
        return []
    series = pd.Series(raw_values, dtype="object")
    converted = pd.to_numeric(series, errors="coerce").astype("float64")
    valid = np.isfinite(converted.to_numpy())
    for position in np.flatnonzero(~valid):
        raw = raw_values[position]
        if raw == "":
            continue
        diagnostics.append(
            Diagnostic(
                row=row_numbers[position],
                category=InvalidNumericFieldWarning,
                message=f"{column}={raw!r} is not a number, defaulted to 0",
            )
        )
    return converted.where(valid, 0.0).tolist()
