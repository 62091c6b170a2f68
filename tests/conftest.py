# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from xlsx2sql.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        monkeypatch.chdir(p)
        monkeypatch.delenv("XLSX2SQL_CONFIG", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    # handler は sys.stderr を作成時に掴むので capsys のためにテスト毎に作り直す
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """sheets:
  - cards
  - orders
table_names:
  cards: card_master
statement_separator: "\\n\\n"
skip_blank_rows: false
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "xlsx2sql.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def _write_workbook(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet, rows in sheets.items():
            df = pd.DataFrame(rows)
            df.to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    """Factory: make_workbook("name.xlsx", {"Sheet": [[header...], [row...]]})."""
    def _make(name: str, sheets: dict[str, list[list[object]]]) -> Path:
        return _write_workbook(temp_workdir / name, sheets)
    return _make


@pytest.fixture()
def cards_workbook(make_workbook) -> Path:
    return make_workbook(
        "cards.xlsx",
        {
            "cards": [
                ["id", "name"],
                [1, "業務用"],
                [2, "日常用"],
            ]
        },
    )
