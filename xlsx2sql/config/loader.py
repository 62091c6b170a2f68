from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Locate the YAML config (--config > XLSX2SQL_CONFIG > ./xlsx2sql.yml)
- Validate against the bundled JSON schema (config_schema.json)
- Apply defaults for every optional key
"""

__all__ = [
    "ConfigError",
    "ConverterConfig",
    "SCHEMA_PATH",
    "DEFAULT_CONFIG_NAME",
    "CONFIG_ENV_VAR",
    "resolve_config_path",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_NAME = "xlsx2sql.yml"
CONFIG_ENV_VAR = "XLSX2SQL_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ConverterConfig:
    sheets: list[str] | None = None  # None = 全シート
    table_names: dict[str, str] = field(default_factory=dict)  # sheet -> table
    statement_separator: str = "\n\n"
    skip_blank_rows: bool = False
    error_log_dir: str | None = None  # None = no JSON Lines error log

    def table_name_for(self, sheet_name: str) -> str:
        return self.table_names.get(sheet_name, sheet_name)


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or the data violates it
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


def resolve_config_path(explicit: str | None, cwd: Path | None = None) -> tuple[Path | None, bool]:
    """Return (path, required).

    required=True when the path was named explicitly (flag or env var), in
    which case a missing file is an error. The implicit ./xlsx2sql.yml is
    only used when present.
    """
    if explicit:
        return Path(explicit), True
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    default = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if default.exists():
        return default, False
    return None, False


def load_config(path: Path | None) -> ConverterConfig:
    if path is None:
        return ConverterConfig()
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    return ConverterConfig(
        sheets=data.get("sheets"),
        table_names=dict(data.get("table_names") or {}),
        statement_separator=data.get("statement_separator", "\n\n"),
        skip_blank_rows=data.get("skip_blank_rows", False),
        error_log_dir=data.get("error_log_dir"),
    )
