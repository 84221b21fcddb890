"""Handler protocol shared by production and testing consoles."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsoleHandler(Protocol):
    """Line-oriented console used by ``ConsoleInterpreter``.

    ``read_line`` raises ``EOFError`` at end of input and ``OSError`` for
    other failures; ``write_line`` raises ``OSError``.
    """

    def write_line(self, text: str) -> None:
        ...

    def read_line(self) -> str:
        ...


__all__ = ["ConsoleHandler"]
