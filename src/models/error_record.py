from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

This module defines the ErrorRecord dataclass used for structured error logging
of catalog load cycles. It supports row=-1 as a sentinel value for source-level
errors (missing header, unreadable file) where no specific row applies.

The JSON Lines layout is fixed: timestamp, source, row, error_type, message.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: CSV source name being loaded
        row: Row number (1-based, header = 1). Use -1 for source-level errors
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Description of the problem
    """
    timestamp: str  # ISO8601 UTC
    source: str
    row: int  # 行番号。不明な場合 -1 許容
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(source: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp.

        Parameters:
            source: CSV source name being loaded
            row: Row number (1-based). Use -1 for source-level errors
            error_type: Error classification in UPPER_SNAKE_CASE format
            message: Description of the problem

        Returns:
            New ErrorRecord instance with current UTC timestamp
        """
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            source=source,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format.

        Returns:
            JSON string representation without extra keys
        """
        # 追加キー阻止: dataclass -> dict して json.dumps
        return json.dumps(asdict(self), ensure_ascii=False)
