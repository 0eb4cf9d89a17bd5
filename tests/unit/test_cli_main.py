from __future__ import annotations
from pathlib import Path
from src.cli import main as cli_main
from src.logging.init import reset_logging


def test_cli_no_sources_success(temp_workdir: Path, capsys):
    reset_logging()
    (temp_workdir / "config" / "catalog.yml").write_text("sources: []\n", encoding="utf-8")
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY sources=0/0 success=0 failed=0 records=0" in out


def test_cli_missing_config(temp_workdir: Path, capsys):
    reset_logging()
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR config: config file not found" in out


def test_cli_filters_from_arguments(write_config: Path, write_sample_csv: Path, capsys):
    reset_logging()
    code = cli_main(["--query", "zap", "--status", "hold"])
    out = capsys.readouterr().out
    assert code == 0
    assert "records=4 matched=1 warnings=1" in out
    assert "window=0-3 columns=3" in out


def test_cli_explicit_config_path(temp_workdir: Path, write_sample_csv: Path, capsys):
    reset_logging()
    alt = temp_workdir / "alt.yml"
    alt.write_text(f"sources: [{write_sample_csv.as_posix()}]\n", encoding="utf-8")
    code = cli_main(["--config", str(alt), "--band", "50+"])
    out = capsys.readouterr().out
    assert code == 0
    assert "matched=1" in out


def test_cli_env_file_overrides_sources(write_config: Path, write_sample_csv: Path, temp_workdir: Path, capsys, monkeypatch):
    reset_logging()
    # load_dotenv が設定した環境変数はテスト後に戻す
    monkeypatch.setenv("CATALOG_SOURCES", "")
    (temp_workdir / ".env").write_text("CATALOG_SOURCES=data/missing.csv\n", encoding="utf-8")
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 2
    assert "SUMMARY sources=1/1 success=0 failed=1" in out
