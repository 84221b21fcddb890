"""Error types raised while interpreting console programs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConsoleIOError(Exception):
    """Fatal console failure that aborts the current interpretation.

    Attributes:
        original: The exception raised by the console handler.
        step: Zero-based index of the instruction being executed.
    """

    original: BaseException
    step: int = 0

    def __str__(self) -> str:
        return f"{self.action} failed at step {self.step}: {self.original!r}"

    @property
    def action(self) -> str:
        return "console I/O"


@dataclass
class ConsoleReadError(ConsoleIOError):
    """Reading a line failed, including reaching end of input."""

    @property
    def action(self) -> str:
        return "read"

    @property
    def end_of_input(self) -> bool:
        return isinstance(self.original, EOFError)


@dataclass
class ConsoleWriteError(ConsoleIOError):
    """Writing a line failed."""

    @property
    def action(self) -> str:
        return "write"


__all__ = ["ConsoleIOError", "ConsoleReadError", "ConsoleWriteError"]
