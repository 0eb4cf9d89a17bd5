from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .inventory_record import InventoryRecord
from .visible_window import VisibleWindow

"""Processing result models for the card catalog pipeline.

PipelineResult is the output of one filter + layout pass over a loaded record
set. SourceStat / ProcessingResult aggregate a whole run over every configured
CSV source and feed the SUMMARY line.
"""


class SourceStatus(Enum):
    """Outcome of one load cycle.

    - SUCCESS: header found, records (possibly zero) normalized
    - FAILED: source unreadable or structurally empty (no header)
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class PipelineResult:
    """Filtered records and the window to materialize for them."""
    matched: list[InventoryRecord]
    window: VisibleWindow

    @property
    def visible(self) -> list[InventoryRecord]:
        """Records inside the window, clamped to the matched list."""
        end = min(self.window.end_index, len(self.matched))
        return self.matched[self.window.start_index:end]


@dataclass(frozen=True)
class SourceStat:
    """Per-source load statistics."""
    source: str  # ファイル名
    status: SourceStatus
    records: int  # 正規化済レコード数
    matched: int  # フィルタ後件数
    warnings: int  # 非致命的診断の件数
    elapsed_seconds: float
    window: VisibleWindow | None = None
    error: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of one run over all sources."""
    success_sources: int
    failed_sources: int
    total_records: int
    total_matched: int
    total_warnings: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    source_stats: list[SourceStat] | None = None

    @property
    def last_window(self) -> VisibleWindow | None:
        """Window of the last successfully loaded source (None if none loaded)."""
        for stat in reversed(self.source_stats or []):
            if stat.window is not None:
                return stat.window
        return None
