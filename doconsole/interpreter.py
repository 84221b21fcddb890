"""
Interpreter for doconsole programs.

Walks a ``Program`` one instruction at a time and performs the I/O each
instruction describes through a ``ConsoleHandler``. The walk is a plain loop,
so program length never grows the Python stack.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from doconsole.config import InterpreterConfig
from doconsole.errors import ConsoleReadError, ConsoleWriteError
from doconsole.handlers import ConsoleHandler, StdioConsole
from doconsole.program import Done, Program, ReadLine, WriteLine

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConsoleInterpreter:
    """Executes console programs against a handler.

    A single interpreter may run many programs one after another. It must not
    be shared between threads reading the same input stream.
    """

    def __init__(
        self,
        handler: ConsoleHandler | None = None,
        config: InterpreterConfig | None = None,
    ) -> None:
        self.handler: ConsoleHandler = handler if handler is not None else StdioConsole()
        self.config = config if config is not None else InterpreterConfig()

    def run(self, program: Program[T]) -> T:
        """Interpret ``program`` and return its result.

        Raises:
            ConsoleReadError: a read failed or input ended.
            ConsoleWriteError: a write failed.
            TypeError: a continuation produced something that is not a Program.
        """

        logger.debug("Starting console program %s", type(program).__name__)
        trace_steps = self.config.trace_steps
        node: Any = program
        step = 0
        while True:
            match node:
                case WriteLine(text=text, next=next_node):
                    if trace_steps:
                        logger.debug("step %d: write %r", step, text)
                    try:
                        self.handler.write_line(text)
                    except OSError as exc:
                        logger.debug("step %d: write failed: %r", step, exc)
                        raise ConsoleWriteError(exc, step) from exc
                    node = next_node
                case ReadLine(continuation=continuation):
                    try:
                        line = self.handler.read_line()
                    except (EOFError, OSError) as exc:
                        logger.debug("step %d: read failed: %r", step, exc)
                        raise ConsoleReadError(exc, step) from exc
                    if trace_steps:
                        logger.debug("step %d: read %r", step, line)
                    node = continuation(line)
                case Done(value=value):
                    logger.debug("Console program finished after %d steps", step)
                    return value
                case _:
                    raise TypeError(
                        f"Expected a console Program at step {step}; "
                        f"got {type(node).__name__}"
                    )
            step += 1


def run(program: Program[T], handler: ConsoleHandler | None = None) -> T:
    """Interpret ``program`` with a fresh ``ConsoleInterpreter``."""

    return ConsoleInterpreter(handler).run(program)


__all__ = ["ConsoleInterpreter", "run"]
