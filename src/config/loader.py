from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import CatalogCapabilities, CatalogConfig, LayoutConfig

"""Config loader for the card catalog pipeline.

Responsibilities:
- Load YAML config/catalog.yml
- Validate against config_schema.json (jsonschema)
- Apply defaults (capabilities / layout / encoding)
- CATALOG_SOURCES env var (os.pathsep separated) overrides ``sources``
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/catalog.yml")
SOURCES_ENV = "CATALOG_SOURCES"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Args:
        data: Configuration data to validate

    Raises:
        ConfigError: If any of the following occurs:
            - The schema file does not exist.
            - The schema file is not valid JSON.
            - The config data fails schema validation (e.g., missing required keys,
              wrong types, or other schema violations).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _sources_from_env() -> list[str] | None:
    raw = os.getenv(SOURCES_ENV)
    if not raw:
        return None
    return [s for s in raw.split(os.pathsep) if s.strip()]


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> CatalogConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("config root must be a mapping")

    _validate_config_schema(data)

    caps_raw = data.get("capabilities") or {}
    layout_raw = data.get("layout") or {}
    # 環境変数 (.env 含む) が設定されていれば sources を上書き
    sources = _sources_from_env() or list(data["sources"])
    return CatalogConfig(
        sources=sources,
        capabilities=CatalogCapabilities(**caps_raw),
        layout=LayoutConfig(**layout_raw),
        encoding=data.get("encoding", "utf-8"),
    )
