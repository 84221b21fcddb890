"""Example console programs, runnable with ``python -m doconsole run``."""

from __future__ import annotations

from typing import Any

from frozendict import frozendict

from doconsole.do import ConsoleGenerator, do
from doconsole.program import Done, Program, ReadLine, WriteLine, pure, read_line, write_line

# Built directly from the instruction constructors.
greet: Program[int] = WriteLine(
    "What's your name?",
    ReadLine(
        lambda name: WriteLine(
            f"Hello {name}",
            Done(len(name)),
        )
    ),
)

greet_again: Program[int] = write_line("Say your name again:").then(
    lambda: read_line().and_then(
        lambda name: write_line(f"Hi {name}").then(lambda: pure(len(name)))
    )
)

echo: Program[None] = read_line().and_then(write_line)

echo_with_banner: Program[None] = write_line("I'm your echo").then(echo)


@do
def _greet_with_do() -> ConsoleGenerator[int]:
    yield write_line("What's your name?")
    name = yield read_line()
    yield write_line(f"Hello {name}")
    return len(name)


greet_do: Program[int] = _greet_with_do()

EXAMPLES: frozendict[str, tuple[str, Program[Any]]] = frozendict(
    {
        "greet": ("Program 1:", greet),
        "greet-again": ("Program 3:", greet_again),
        "echo": ("Echo:", echo),
        "echo-banner": ("Program 4:", echo_with_banner),
        "greet-do": ("Program 1 (do-notation):", greet_do),
    }
)

DEFAULT_RUN_ORDER: tuple[str, ...] = ("greet", "greet-again", "echo-banner")

__all__ = [
    "DEFAULT_RUN_ORDER",
    "EXAMPLES",
    "echo",
    "echo_with_banner",
    "greet",
    "greet_again",
    "greet_do",
]
