from __future__ import annotations

from datetime import datetime
from pathlib import Path

from xlsx2sql.cli import main as cli_main

"""Integration test: real workbook -> .sql file through the CLI.

Covers every literal kind (integer, decimal, text with quote, boolean,
timestamp, blank) and multi-sheet ordering with the default separator.
"""

EXPECTED_SQL = (
    "INSERT INTO `items` (`id`, `name`, `price`, `active`, `created`) VALUES\n"
    "(1,'it''s',9.5,1,'2024-01-05 10:30:00'),\n"
    "(2,NULL,3.25,0,NULL);\n"
    "\n"
    "INSERT INTO `orders` (`order_id`, `item_id`) VALUES\n"
    "(100,1),\n"
    "(101,2);\n"
    "\n"
)


def test_run_success_multi_sheet(make_workbook, capsys):
    path = make_workbook(
        "shop.xlsx",
        {
            "items": [
                ["id", "name", "price", "active", "created"],
                [1, "it's", 9.5, True, datetime(2024, 1, 5, 10, 30)],
                [2, None, 3.25, False, None],
            ],
            "orders": [
                ["order_id", "item_id"],
                [100, 1],
                [101, 2],
            ],
        },
    )
    code = cli_main([str(path)])
    err = capsys.readouterr().err

    assert code == 0
    assert path.with_suffix(".sql").read_text(encoding="utf-8") == EXPECTED_SQL
    assert "SUMMARY sheets=2 converted=2 skipped=0 rows=4" in err


def test_run_success_selected_sheets_and_table_names(make_workbook, temp_workdir: Path, capsys):
    path = make_workbook(
        "shop.xlsx",
        {
            "items": [["id"], [1]],
            "orders": [["order_id"], [100]],
            "notes": [["text"], ["skip me"]],
        },
    )
    (temp_workdir / "xlsx2sql.yml").write_text(
        "sheets: [orders, items]\ntable_names:\n  orders: t_orders\n",
        encoding="utf-8",
    )
    code = cli_main([str(path), "-o", "-"])
    out = capsys.readouterr().out

    assert code == 0
    # workbook order is kept, not the order of the sheets list
    assert out == (
        "INSERT INTO `items` (`id`) VALUES\n(1);\n\n"
        "INSERT INTO `t_orders` (`order_id`) VALUES\n(100);\n\n"
    )


def test_run_success_same_table_name_gives_separate_statements(make_workbook, temp_workdir: Path, capsys):
    path = make_workbook("split.xlsx", {"jan": [["v"], [1]], "feb": [["v"], [2]]})
    (temp_workdir / "xlsx2sql.yml").write_text(
        "table_names:\n  jan: sales\n  feb: sales\n", encoding="utf-8"
    )
    assert cli_main([str(path), "-o", "-"]) == 0
    assert capsys.readouterr().out == (
        "INSERT INTO `sales` (`v`) VALUES\n(1);\n\n"
        "INSERT INTO `sales` (`v`) VALUES\n(2);\n\n"
    )


def test_run_success_blank_rows_kept_as_null_rows(make_workbook, temp_workdir: Path, capsys):
    path = make_workbook("gaps.xlsx", {"s": [["a", "b"], [1, 2], [None, None], [3, 4]]})
    assert cli_main([str(path), "-o", "-"]) == 0
    assert capsys.readouterr().out == "INSERT INTO `s` (`a`, `b`) VALUES\n(1,2),\n(NULL,NULL),\n(3,4);\n\n"

    (temp_workdir / "xlsx2sql.yml").write_text("skip_blank_rows: true\n", encoding="utf-8")
    assert cli_main([str(path), "-o", "-"]) == 0
    assert capsys.readouterr().out == "INSERT INTO `s` (`a`, `b`) VALUES\n(1,2),\n(3,4);\n\n"
