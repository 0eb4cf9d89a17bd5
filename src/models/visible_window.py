from __future__ import annotations

from dataclasses import dataclass

"""VisibleWindow model for the virtual grid layout.

Describes the contiguous index range of a result list that currently needs to
be materialized plus the grid geometry that produced it. Recomputed on every
scroll / resize / result change, never persisted.
"""

__all__ = [
    "VisibleWindow",
]


@dataclass(frozen=True)
class VisibleWindow:
    """Slice of the result list to materialize and the geometry behind it.

    ``end_index`` is exclusive and may exceed the item count on the last row;
    callers must clamp when slicing (see ``src.services.layout.visible_slice``).
    """
    start_index: int
    end_index: int
    column_count: int
    total_extent: float  # 仮想スクロール領域の高さ
    start_row: int = 0
    end_row: int = 0
    row_count: int = 0
    stride_x: float = 0.0  # item_width + gap
    stride_y: float = 0.0  # item_height + gap

    @property
    def is_empty(self) -> bool:
        return self.end_index <= self.start_index

    def __len__(self) -> int:
        return max(0, self.end_index - self.start_index)
