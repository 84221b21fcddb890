"""In-memory console handler for tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Literal

TraceEvent = tuple[Literal["write", "read"], str]


class ScriptedConsole:
    """Serves scripted input lines and records everything written.

    An exception instance placed among ``inputs`` is raised by the read that
    reaches it. Reading past the last input raises ``EOFError``.
    """

    def __init__(self, inputs: Iterable[str | BaseException] = ()) -> None:
        self._pending: deque[str | BaseException] = deque(inputs)
        self.outputs: list[str] = []
        self.reads: list[str] = []
        self.trace: list[TraceEvent] = []

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def write_line(self, text: str) -> None:
        self.outputs.append(text)
        self.trace.append(("write", text))

    def read_line(self) -> str:
        if not self._pending:
            raise EOFError("scripted input exhausted")
        item = self._pending.popleft()
        if isinstance(item, BaseException):
            raise item
        self.reads.append(item)
        self.trace.append(("read", item))
        return item


__all__ = ["ScriptedConsole", "TraceEvent"]
