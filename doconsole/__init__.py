"""
doconsole: console interaction as data.

Programs are built from three instructions (``WriteLine``, ``ReadLine``,
``Done``), composed with ``and_then``, and only perform I/O when handed to a
``ConsoleInterpreter``.

Example:
    >>> from doconsole import read_line, run, write_line
    >>> from doconsole.handlers import ScriptedConsole
    >>> program = write_line("Name?").then(read_line).map(len)
    >>> run(program, ScriptedConsole(["Ada"]))
    3
"""

from doconsole.config import DEFAULT_CONFIG, InterpreterConfig
from doconsole.do import ConsoleGenerator, do
from doconsole.errors import ConsoleIOError, ConsoleReadError, ConsoleWriteError
from doconsole.handlers import ConsoleHandler, ScriptedConsole, StdioConsole
from doconsole.interpreter import ConsoleInterpreter, run
from doconsole.program import (
    ConsoleInstruction,
    Done,
    Program,
    ReadLine,
    WriteLine,
    and_then,
    pure,
    read_line,
    sequence,
    write_line,
)

__all__ = [
    # Program model
    "ConsoleInstruction",
    "Done",
    "Program",
    "ReadLine",
    "WriteLine",
    # Constructors and composition
    "and_then",
    "pure",
    "read_line",
    "sequence",
    "write_line",
    "do",
    "ConsoleGenerator",
    # Interpretation
    "ConsoleInterpreter",
    "run",
    "ConsoleHandler",
    "ScriptedConsole",
    "StdioConsole",
    # Configuration
    "DEFAULT_CONFIG",
    "InterpreterConfig",
    # Errors
    "ConsoleIOError",
    "ConsoleReadError",
    "ConsoleWriteError",
]
