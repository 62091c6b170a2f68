from __future__ import annotations

import io
from pathlib import Path

import pytest

from xlsx2sql.output.writer import (
    OutputDestination,
    OutputWriteError,
    join_statements,
    resolve_destination,
    write_output,
)


def test_resolve_destination_default_replaces_suffix():
    dest = resolve_destination(Path("data/cards.xlsx"), None)
    assert dest.path == Path("data/cards.sql")
    assert not dest.is_stdout


def test_resolve_destination_explicit_file():
    dest = resolve_destination(Path("cards.xlsx"), "out/result.sql")
    assert dest.path == Path("out/result.sql")
    assert str(dest) == "out/result.sql"


def test_resolve_destination_stdout_marker():
    dest = resolve_destination(Path("cards.xlsx"), "-")
    assert dest.is_stdout
    assert str(dest) == "<stdout>"


def test_join_statements_adds_separator_after_each():
    assert join_statements(["A;", "B;"]) == "A;\n\nB;\n\n"
    assert join_statements(["A;"], separator="\n") == "A;\n"
    assert join_statements([]) == ""


def test_write_output_to_file(temp_workdir: Path):
    dest = OutputDestination(path=temp_workdir / "out.sql")
    write_output("INSERT INTO `t` (`a`) VALUES\n(1);\n\n", dest)
    assert dest.path.read_text(encoding="utf-8") == "INSERT INTO `t` (`a`) VALUES\n(1);\n\n"


def test_write_output_keeps_utf8(temp_workdir: Path):
    dest = OutputDestination(path=temp_workdir / "jp.sql")
    write_output("'業務用'", dest)
    assert dest.path.read_bytes() == "'業務用'".encode("utf-8")


def test_write_output_to_stream():
    buf = io.StringIO()
    write_output("X;\n\n", OutputDestination(path=None), stream=buf)
    assert buf.getvalue() == "X;\n\n"


def test_write_output_to_stdout_default(capsys):
    write_output("Y;\n\n", OutputDestination(path=None))
    assert capsys.readouterr().out == "Y;\n\n"


def test_write_output_missing_directory(temp_workdir: Path):
    dest = OutputDestination(path=temp_workdir / "no_such_dir" / "out.sql")
    with pytest.raises(OutputWriteError) as e:
        write_output("X;", dest)
    assert "failed to write" in str(e.value)
