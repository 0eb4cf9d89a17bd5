# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

SAMPLE_CSV = (
    "Set,Number,Name,Category,Rarity,Condition,Qty,Price_BND,Status,Image_Direct,Image_URL,Notes\r\n"
    "Base Set,58/102,Pikachu,Single,Common,NM,3,2,available,,https://img/pika.png,\r\n"
    "Base Set,4/102,Charizard,Single,Holo Rare,LP,1,60,SOLD,https://cdn/zard.png,https://img/zard.png,\"Shadowless, 1st run\"\r\n"
    "Jungle,,Jungle Booster Box,Sealed,,NM,0,45,AVAILABLE,,,\r\n"
    ",,,,,,,,,,,\r\n"
    "Fossil,15/62,Zapdos,,Holo Rare,NM,2,abc,HOLD,,,\"said \"\"mint\"\"\"\r\n"
)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("CATALOG_SOURCES", raising=False)
        yield p


@pytest.fixture()
def sample_csv_text() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def sample_config_yaml() -> str:
    return """sources:
  - ./data/singles.csv
capabilities:
  supports_categories: true
  supports_quantity: true
  available_requires_quantity: true
  sort_by_price: false
layout:
  item_width: 200
  item_height: 260
  gap: 12
  viewport_width: 800
  viewport_height: 600
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "catalog.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_sample_csv(temp_workdir: Path, sample_csv_text: str) -> Path:
    f = temp_workdir / "data" / "singles.csv"
    f.write_text(sample_csv_text, encoding="utf-8")
    return f
