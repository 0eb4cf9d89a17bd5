from __future__ import annotations

import json

from src.models.error_record import ErrorRecord

"""Unit tests for the ErrorRecord model."""


def test_error_record_row_minus_one_support():
    """Source-level errors use row=-1."""
    rec = ErrorRecord.create(
        source="singles.csv",
        row=-1,
        error_type="MISSING_HEADER",
        message="no rows in input",
    )

    assert rec.row == -1
    assert rec.source == "singles.csv"
    assert rec.error_type == "MISSING_HEADER"

    data = json.loads(rec.to_json_line())
    assert data["row"] == -1
    assert "timestamp" in data and data["timestamp"].endswith("Z")
    assert set(data.keys()) == {"timestamp", "source", "row", "error_type", "message"}


def test_error_record_keeps_non_ascii_text():
    rec = ErrorRecord.create("singles.csv", 4, "INVALID_NUMERIC_FIELD", "price_bnd='≈5' is not a number")
    assert "≈5" in rec.to_json_line()
