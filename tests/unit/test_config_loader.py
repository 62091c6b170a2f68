from __future__ import annotations

from pathlib import Path

import pytest

from xlsx2sql.config.loader import (
    CONFIG_ENV_VAR,
    ConfigError,
    ConverterConfig,
    load_config,
    resolve_config_path,
)


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.sheets == ["cards", "orders"]
    assert cfg.table_names == {"cards": "card_master"}
    assert cfg.statement_separator == "\n\n"
    assert cfg.skip_blank_rows is False
    assert cfg.error_log_dir is None
    assert cfg.table_name_for("cards") == "card_master"
    assert cfg.table_name_for("orders") == "orders"


def test_load_config_none_gives_defaults():
    cfg = load_config(None)
    assert cfg == ConverterConfig()
    assert cfg.sheets is None
    assert cfg.statement_separator == "\n\n"


def test_load_config_empty_file_gives_defaults(temp_workdir: Path):
    p = temp_workdir / "xlsx2sql.yml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == ConverterConfig()


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError) as e:
        load_config(temp_workdir / "not_exists.yml")
    assert "config file not found" in str(e.value)


def test_load_config_invalid_yaml(temp_workdir: Path):
    p = temp_workdir / "bad.yml"
    p.write_text("sheets: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(p)
    assert "invalid yaml" in str(e.value)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_wrong_type(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("skip_blank_rows: false", "skip_blank_rows: maybe")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_resolve_config_path_explicit(temp_workdir: Path):
    path, required = resolve_config_path("custom.yml", cwd=temp_workdir)
    assert path == Path("custom.yml")
    assert required is True


def test_resolve_config_path_env(temp_workdir: Path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, "from_env.yml")
    path, required = resolve_config_path(None, cwd=temp_workdir)
    assert path == Path("from_env.yml")
    assert required is True


def test_resolve_config_path_default_present(write_config: Path, temp_workdir: Path):
    path, required = resolve_config_path(None, cwd=temp_workdir)
    assert path == write_config
    assert required is False


def test_resolve_config_path_nothing(temp_workdir: Path):
    assert resolve_config_path(None, cwd=temp_workdir) == (None, False)
