from __future__ import annotations

from pathlib import Path

from src.cli import main as cli_main
from src.cli.__main__ import EXIT_FATAL, EXIT_PARTIAL_FAILURE, EXIT_SUCCESS_ALL
from src.logging.init import reset_logging

"""Exit code contract tests: 0 all sources loaded, 2 some failed, 1 fatal."""


def test_exit_code_values():
    assert (EXIT_SUCCESS_ALL, EXIT_FATAL, EXIT_PARTIAL_FAILURE) == (0, 1, 2)


def test_exit_code_fatal_startup(temp_workdir: Path, capsys):
    # config/catalog.yml 無し → exit 1
    reset_logging()
    code = cli_main([])
    assert code == 1
    assert "ERROR config:" in capsys.readouterr().out


def test_exit_code_fatal_invalid_config(temp_workdir: Path, capsys):
    reset_logging()
    (temp_workdir / "config" / "catalog.yml").write_text("sources: 42\n", encoding="utf-8")
    code = cli_main([])
    assert code == 1
    assert "config validation failed" in capsys.readouterr().out


def test_exit_code_all_success(write_config: Path, write_sample_csv: Path, capsys):
    reset_logging()
    assert cli_main([]) == 0


def test_exit_code_partial_failure(temp_workdir: Path, write_sample_csv: Path, capsys):
    reset_logging()
    (temp_workdir / "config" / "catalog.yml").write_text(
        "sources:\n  - data/singles.csv\n  - data/missing.csv\n", encoding="utf-8"
    )
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 2
    assert "ERROR source=missing.csv source not found" in out


def test_exit_code_all_failed_is_partial(temp_workdir: Path, capsys):
    reset_logging()
    (temp_workdir / "data" / "blank.csv").write_text("", encoding="utf-8")
    (temp_workdir / "config" / "catalog.yml").write_text("sources: [data/blank.csv]\n", encoding="utf-8")
    assert cli_main([]) == 2
    logged = "".join(p.read_text(encoding="utf-8") for p in Path("logs").glob("*.log"))
    assert "MISSING_HEADER" in logged
