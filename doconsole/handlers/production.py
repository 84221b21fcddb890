"""Console handler backed by the process's standard streams."""

from __future__ import annotations

import sys
from typing import TextIO


class StdioConsole:
    """Reads from ``stdin`` and writes to ``stdout``.

    Streams are resolved at call time unless given explicitly, so pytest's
    capture and ``contextlib.redirect_stdout`` are honoured.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write_line(self, text: str) -> None:
        out = self.stdout
        try:
            out.write(f"{text}\n")
            out.flush()
        except ValueError as exc:
            # UnicodeEncodeError, or writing to a closed stream.
            raise OSError(f"cannot write to stdout: {exc}") from exc

    def read_line(self) -> str:
        try:
            line = self.stdin.readline()
        except ValueError as exc:
            # UnicodeDecodeError, or reading from a closed stream.
            raise OSError(f"cannot read from stdin: {exc}") from exc
        if line == "":
            raise EOFError("end of input")
        if line.endswith("\n"):
            line = line[:-1]
        return line


__all__ = ["StdioConsole"]
