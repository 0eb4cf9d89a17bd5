from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

from src.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from src.logging.init import log_summary, set_debug, setup_logging
from src.models.config_models import CatalogConfig
from src.models.filter_criteria import FilterCriteria
from src.normalize.records import MissingHeaderError
from src.services.orchestrator import ProcessingError, load_catalog, process_all, read_source
from src.services.summary import render_summary_line

"""CLI entrypoint for the card catalog pipeline.

Flow:
- Load .env (CATALOG_SOURCES override) and config/catalog.yml
- Build a FilterCriteria snapshot from the command line
- Load every source, filter, compute the visible window
- Print a SUMMARY line and exit with a status code
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; failures only warn."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Trading card catalog loader / filter")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to catalog.yml")
    p.add_argument("--query", default="", help="Case-insensitive search text")
    p.add_argument("--band", default="", help="Price band token (1-3, 4-5, 6-10, 11-25, 26-50, 50+)")
    p.add_argument("--status", default="", help="AVAILABLE, ALL (unsold), HOLD or SOLD")
    p.add_argument("--category", default="", help="Category name or All")
    p.add_argument("--scroll", type=float, default=0.0, help="Scroll offset for the window computation")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first records then exit")
    return p.parse_args(argv)


def _inspect_data(cfg: CatalogConfig) -> int:
    if not cfg.sources:
        print("inspect: no sources configured")
        return EXIT_SUCCESS_ALL
    for source in cfg.sources:
        path = Path(source)
        print(f"SOURCE: {path.name}")
        try:
            loaded = load_catalog(read_source(path, cfg.encoding))
        except (ProcessingError, MissingHeaderError) as e:
            print(f"  error={e}")
            continue
        print(f"  header={loaded.header} records={len(loaded.records)} warnings={len(loaded.diagnostics)}")
        print("    sample_records=", [asdict(r) for r in loaded.records[:3]])
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: 空リスト [] の場合に sys.argv[1:] (pytest の引数) が混入しないよう None のみ判定
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    if args.inspect_data:
        return _inspect_data(cfg)

    criteria = FilterCriteria(
        query=args.query,
        price_band=args.band,
        status=args.status.upper(),
        category=args.category,
    )
    logger.info(f"Loading {len(cfg.sources)} source(s)")
    result = process_all(cfg, criteria=criteria, scroll_offset=args.scroll)

    total_sources = result.success_sources + result.failed_sources
    summary_line = render_summary_line(total_sources, result)
    # log_summary が "SUMMARY " を付与するので先頭ラベルを除去
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_sources > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
