from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

"""Output destination handling: SQL text to a file or standard output."""

__all__ = [
    "OutputWriteError",
    "OutputDestination",
    "STDOUT_MARKER",
    "DEFAULT_SEPARATOR",
    "resolve_destination",
    "join_statements",
    "write_output",
]

STDOUT_MARKER = "-"
DEFAULT_SEPARATOR = "\n\n"


class OutputWriteError(Exception):
    pass


@dataclass(frozen=True)
class OutputDestination:
    path: Path | None  # None = standard output

    @property
    def is_stdout(self) -> bool:
        return self.path is None

    def __str__(self) -> str:
        return "<stdout>" if self.path is None else str(self.path)


def resolve_destination(input_path: Path, output: str | None) -> OutputDestination:
    """``-o -`` -> stdout, ``-o FILE`` -> FILE, nothing -> input path with .sql suffix."""
    if output == STDOUT_MARKER:
        return OutputDestination(path=None)
    if output:
        return OutputDestination(path=Path(output))
    return OutputDestination(path=input_path.with_suffix(".sql"))


def join_statements(statements: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Each statement followed by separator (blank line between statements by default)."""
    return "".join(f"{s}{separator}" for s in statements)


def write_output(content: str, destination: OutputDestination, stream: TextIO | None = None) -> None:
    if destination.path is None:
        out = stream if stream is not None else sys.stdout
        try:
            out.write(content)
            out.flush()
        except OSError as e:
            raise OutputWriteError(f"failed to write to stdout: {e}") from e
        return

    try:
        destination.path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"failed to write to {destination.path}: {e}") from e
