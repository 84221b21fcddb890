"""Console handlers the interpreter performs I/O through."""

from doconsole.handlers.base import ConsoleHandler
from doconsole.handlers.production import StdioConsole
from doconsole.handlers.testing import ScriptedConsole

__all__ = [
    "ConsoleHandler",
    "ScriptedConsole",
    "StdioConsole",
]
