from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import CatalogCapabilities, CatalogConfig, LayoutConfig
from ..models.diagnostic import Diagnostic
from ..models.filter_criteria import FilterCriteria
from ..models.inventory_record import InventoryRecord
from ..models.processing_result import PipelineResult, ProcessingResult, SourceStat, SourceStatus
from ..normalize.records import MissingHeaderError, normalize_with_diagnostics
from ..parsing.tabular import parse_with_diagnostics
from .filtering import DEFAULT_CAPABILITIES, apply_filters
from .layout import compute_window
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Service orchestration for the card catalog pipeline.

The core stages (parse, normalize, filter, layout) are pure functions. This
module is the explicit orchestrator around them:

- load_catalog(): raw text -> records (+ diagnostics), one load cycle
- run_pipeline(): records -> filtered records -> visible window
- process_all(): every configured CSV source, with progress, error log and
  aggregated metrics for the SUMMARY line

Callers re-run run_pipeline() whenever criteria, viewport, scroll position or
the record set change; a stale result is simply discarded.
"""


class ProcessingError(Exception):
    """Base exception for source-level processing errors."""
    pass


@dataclass(frozen=True)
class CatalogLoad:
    """Result of one load cycle."""
    records: list[InventoryRecord]
    header: list[str]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def load_catalog(text: str) -> CatalogLoad:
    """Parse and normalize one CSV export.

    Raises:
        MissingHeaderError: if the text holds no header row
    """
    parsed = parse_with_diagnostics(text)
    normalized = normalize_with_diagnostics(parsed.rows)
    return CatalogLoad(
        records=normalized.records,
        header=normalized.header,
        diagnostics=[*parsed.diagnostics, *normalized.diagnostics],
    )


def run_pipeline(
    records: Sequence[InventoryRecord],
    criteria: FilterCriteria,
    capabilities: CatalogCapabilities = DEFAULT_CAPABILITIES,
    layout: LayoutConfig | None = None,
    scroll_offset: float = 0.0,
) -> PipelineResult:
    """Filter ``records`` and compute the window for the current viewport."""
    layout = layout or LayoutConfig()
    matched = apply_filters(records, criteria, capabilities)
    window = compute_window(
        len(matched),
        layout.viewport_width,
        layout.viewport_height,
        scroll_offset,
        layout.item_width,
        layout.item_height,
        layout.gap,
    )
    return PipelineResult(matched=matched, window=window)


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read one CSV export from disk.

    Raises:
        ProcessingError: if the file is missing, unreadable or not decodable
    """
    if not path.exists():
        raise ProcessingError(f"source not found: {path}")
    if not path.is_file():
        raise ProcessingError(f"source is not a file: {path}")
    try:
        # utf-8-sig 相当: スプレッドシート出力の BOM を除去
        return path.read_text(encoding=encoding).lstrip("\ufeff")
    except (OSError, UnicodeDecodeError) as e:
        raise ProcessingError(f"cannot read source {path}: {e}") from e


def process_all(
    config: CatalogConfig,
    criteria: FilterCriteria | None = None,
    scroll_offset: float = 0.0,
    error_log: ErrorLogBuffer | None = None,
) -> ProcessingResult:
    """Load every configured source and run the pipeline on each.

    A failing source (unreadable, no header) is recorded and skipped; the
    remaining sources are still processed.

    Args:
        config: Catalog configuration (sources, capabilities, layout)
        criteria: Filter snapshot applied to every source (default: no filters)
        scroll_offset: Scroll position used for the window computation
        error_log: Buffer receiving diagnostics (a fresh one is used if None)

    Returns:
        ProcessingResult with per-source stats and aggregated counts
    """
    start_time = datetime.now(UTC)
    criteria = criteria or FilterCriteria()
    error_log = error_log if error_log is not None else ErrorLogBuffer()

    source_stats: list[SourceStat] = []
    success = failed = total_records = total_matched = total_warnings = 0

    with ProgressTracker(len(config.sources)) as progress:
        for source in config.sources:
            path = Path(source)
            progress.start_source(path.name)
            stat = _process_single_source(path, config, criteria, scroll_offset, error_log)
            source_stats.append(stat)

            if stat.status == SourceStatus.SUCCESS:
                success += 1
                total_records += stat.records
                total_matched += stat.matched
            else:
                failed += 1
            total_warnings += stat.warnings

            progress.set_postfix(success=success, failed=failed, records=total_records)
            progress.finish_source()

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"error log written: {log_path}")

    end_time = datetime.now(UTC)
    return ProcessingResult(
        success_sources=success,
        failed_sources=failed,
        total_records=total_records,
        total_matched=total_matched,
        total_warnings=total_warnings,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        source_stats=source_stats,
    )


def _process_single_source(
    path: Path,
    config: CatalogConfig,
    criteria: FilterCriteria,
    scroll_offset: float,
    error_log: ErrorLogBuffer,
) -> SourceStat:
    """Run one load cycle + pipeline pass; never raises for source errors."""
    started = datetime.now(UTC)

    def _failed(error_type: str, message: str) -> SourceStat:
        error_log.append(ErrorRecord.create(path.name, -1, error_type, message))
        logger.error(f"source={path.name} {message}")
        return SourceStat(
            source=path.name,
            status=SourceStatus.FAILED,
            records=0,
            matched=0,
            warnings=0,
            elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
            error=message,
        )

    try:
        text = read_source(path, config.encoding)
    except ProcessingError as e:
        return _failed("SOURCE_READ_ERROR", str(e))
    try:
        loaded = load_catalog(text)
    except MissingHeaderError as e:
        return _failed("MISSING_HEADER", str(e))

    warnings = error_log.extend_from_diagnostics(path.name, loaded.diagnostics)
    for d in loaded.diagnostics:
        logger.debug(f"source={path.name} row={d.row} {d.error_type}: {d.message}")
    if warnings:
        logger.warning(f"source={path.name} {warnings} row(s) degraded while loading")

    result = run_pipeline(loaded.records, criteria, config.capabilities, config.layout, scroll_offset)
    window = result.window
    logger.info(
        f"source={path.name} records={len(loaded.records)} matched={len(result.matched)} "
        f"window={window.start_index}-{window.end_index} columns={window.column_count}"
    )
    return SourceStat(
        source=path.name,
        status=SourceStatus.SUCCESS,
        records=len(loaded.records),
        matched=len(result.matched),
        warnings=warnings,
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
        window=window,
    )
