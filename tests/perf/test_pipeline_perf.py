from __future__ import annotations

import importlib.util
import time
from pathlib import Path

import pytest

from src.models.config_models import CatalogCapabilities
from src.models.filter_criteria import FilterCriteria
from src.services.orchestrator import load_catalog, run_pipeline

"""Performance smoke test: load + filter + window on a synthetic catalog.

Budgets are lenient so CI stays green on slow runners; the point is to catch
accidental quadratic behaviour in the parser or the filter engine.
"""

ROWS = 20_000
SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "gen_sample_catalog.py"


def _load_generator():
    spec = importlib.util.spec_from_file_location("gen_sample_catalog", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def catalog_text(tmp_path_factory) -> str:
    gen = _load_generator()
    path = tmp_path_factory.mktemp("perf") / "catalog.csv"
    gen.write_catalog(gen.generate_catalog(ROWS), path)
    return path.read_text(encoding="utf-8")


def test_load_catalog_budget(catalog_text: str):
    start = time.perf_counter()
    loaded = load_catalog(catalog_text)
    elapsed = time.perf_counter() - start
    assert len(loaded.records) == ROWS
    # dirty 行は価格警告のみ (行落ちしない)
    assert all(d.error_type == "INVALID_NUMERIC_FIELD" for d in loaded.diagnostics)
    assert elapsed < 10.0, f"load too slow: {elapsed:.3f}s"


def test_filter_and_window_budget(catalog_text: str):
    records = load_catalog(catalog_text).records
    caps = CatalogCapabilities(supports_categories=True, supports_quantity=True, sort_by_price=True)
    criteria = FilterCriteria(query="rare", status="AVAILABLE", price_band="11-25", category="Single")

    start = time.perf_counter()
    for offset in range(0, 50_000, 2_500):
        result = run_pipeline(records, criteria, caps, scroll_offset=offset)
    elapsed = time.perf_counter() - start

    prices = [r.price for r in result.matched]
    assert prices == sorted(prices)
    assert all(11 <= p <= 25 for p in prices)
    assert elapsed < 10.0, f"pipeline too slow: {elapsed:.3f}s"
