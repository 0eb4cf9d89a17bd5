from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from ..models.visible_window import VisibleWindow

"""Windowed layout computation for the virtual card grid.

compute_window() decides which contiguous slice of a (possibly very long)
result list must be materialized for a given viewport and scroll offset. It
keeps one row of overscan above the fold and two rows below it so fast
scrolling does not show blank cells.

The engine holds no state: callers re-run it on every scroll, resize,
result-count or footprint change. Degenerate geometry is clamped, never
raised: negative or non-finite sizes read as 0, a zero stride reads as 1.
"""

__all__ = [
    "OVERSCAN_ROWS_ABOVE",
    "OVERSCAN_ROWS_BELOW",
    "compute_window",
    "visible_slice",
    "item_position",
]

OVERSCAN_ROWS_ABOVE = 1
OVERSCAN_ROWS_BELOW = 2

T = TypeVar("T")


def _non_negative(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(0.0, float(value))


def _stride(size: float, gap: float) -> float:
    stride = _non_negative(size) + _non_negative(gap)
    if stride <= 0:
        return 1.0
    return stride


def compute_window(
    item_count: int,
    viewport_width: float,
    viewport_height: float,
    scroll_offset: float,
    item_width: float,
    item_height: float,
    gap: float,
) -> VisibleWindow:
    """Compute the visible index range and grid geometry.

    Args:
        item_count: Number of items in the (filtered) list
        viewport_width: Width of the scroll container
        viewport_height: Height of the scroll container
        scroll_offset: Current vertical scroll position
        item_width: Card width
        item_height: Card height
        gap: Spacing between cards (both axes)

    Returns:
        VisibleWindow with exclusive ``end_index`` (may exceed item_count)
    """
    item_count = max(0, int(item_count))
    stride_x = _stride(item_width, gap)
    stride_y = _stride(item_height, gap)
    width = _non_negative(viewport_width)
    height = _non_negative(viewport_height)
    offset = _non_negative(scroll_offset)

    # 列数は最低 1 (幅 0 のビューポート対策)
    column_count = max(1, math.floor(width / stride_x))
    row_count = math.ceil(item_count / column_count)
    total_extent = row_count * stride_y

    visible_rows = math.ceil(height / stride_y)
    first_row = math.floor(offset / stride_y)

    start_row = min(row_count, max(0, first_row - OVERSCAN_ROWS_ABOVE))
    end_row = min(row_count, start_row + visible_rows + OVERSCAN_ROWS_BELOW)

    return VisibleWindow(
        start_index=start_row * column_count,
        end_index=end_row * column_count,
        column_count=column_count,
        total_extent=total_extent,
        start_row=start_row,
        end_row=end_row,
        row_count=row_count,
        stride_x=stride_x,
        stride_y=stride_y,
    )


def visible_slice(items: Sequence[T], window: VisibleWindow) -> list[T]:
    """Slice ``items`` by the window, clamping the exclusive end to len(items)."""
    end = min(window.end_index, len(items))
    start = min(window.start_index, end)
    return list(items[start:end])


def item_position(index: int, window: VisibleWindow) -> tuple[float, float]:
    """Absolute (top, left) offset of item ``index`` inside the virtual area."""
    row, col = divmod(index, window.column_count)
    return row * window.stride_y, col * window.stride_x
