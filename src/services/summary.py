from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for catalog runs.

Format:
SUMMARY sources={total}/{total} success={success} failed={failed}
records={records} matched={matched} warnings={warnings} window={start}-{end}
columns={columns} extent={extent} elapsed_sec={elapsed}
"""


def _format_number(value: float) -> str:
    """Integers without decimals, tiny values without scientific notation."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if abs(value) < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(total_sources: int, result: ProcessingResult) -> str:
    """Render a SUMMARY line from a ProcessingResult.

    The window fields describe the last successfully loaded source; with no
    successful source they read ``window=0-0 columns=0 extent=0``.

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2025, 1, 1, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_sources=1, failed_sources=0, total_records=3,
        ...     total_matched=2, total_warnings=0, start_time=t, end_time=t,
        ...     elapsed_seconds=0.5,
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY sources=1/1 success=1 failed=0 records=3 matched=2 warnings=0 window=0-0 columns=0 extent=0 elapsed_sec=0.5'
    """
    window = result.last_window
    if window is None:
        start, end, columns, extent = 0, 0, 0, 0.0
    else:
        start, end, columns, extent = (
            window.start_index, window.end_index, window.column_count, window.total_extent
        )
    return (
        f"SUMMARY sources={total_sources}/{total_sources} "
        f"success={result.success_sources} "
        f"failed={result.failed_sources} "
        f"records={result.total_records} "
        f"matched={result.total_matched} "
        f"warnings={result.total_warnings} "
        f"window={start}-{end} "
        f"columns={columns} "
        f"extent={_format_number(extent)} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)}"
    )
