"""Shared fixtures for doconsole tests."""

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from doconsole import ConsoleInterpreter, InterpreterConfig, Program, ScriptedConsole


@pytest.fixture
def scripted_console() -> Callable[..., ScriptedConsole]:
    """Factory for scripted consoles fed with the given input lines."""

    def factory(*inputs: str | BaseException) -> ScriptedConsole:
        return ScriptedConsole(inputs)

    return factory


@pytest.fixture
def interpret() -> Callable[[Program[Any], Iterable[str | BaseException]], tuple[list, Any]]:
    """Run a program against scripted input and return ``(trace, result)``."""

    def runner(program: Program[Any], inputs: Iterable[str | BaseException] = ()) -> tuple[list, Any]:
        console = ScriptedConsole(inputs)
        interpreter = ConsoleInterpreter(console, InterpreterConfig(trace_steps=True))
        result = interpreter.run(program)
        return console.trace, result

    return runner
