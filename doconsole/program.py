"""
Program model for the doconsole DSL.

A console program is inert data: a chain of ``WriteLine`` / ``ReadLine``
instructions ending in ``Done``. Nothing here performs I/O; building and
composing programs only allocates new nodes. See ``doconsole.interpreter``
for the component that actually talks to a console.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class Program(ABC, Generic[T]):
    """Base class for console programs producing a value of type ``T``.

    The variant set is closed: only ``WriteLine``, ``ReadLine`` and ``Done``
    may subclass ``Program``.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__qualname__} cannot extend Program; "
                "the instruction set is WriteLine, ReadLine and Done"
            )

    def and_then(self, f: Callable[[T], Program[U]]) -> Program[U]:
        """Monadic bind: run this program, then the program ``f`` builds from its result."""

        return and_then(self, f)

    def then(self, supplier: Callable[[], Program[U]] | Program[U]) -> Program[U]:
        """Sequence ``supplier`` after this program, discarding this program's result."""

        if isinstance(supplier, Program):
            follow_up = supplier
            return and_then(self, lambda _value: follow_up)
        if not callable(supplier):
            raise TypeError("supplier must be a Program or a zero-argument callable")
        return and_then(self, lambda _value: supplier())

    def map(self, f: Callable[[T], U]) -> Program[U]:
        """Map a function over this program's result."""

        if not callable(f):
            raise TypeError("mapper must be callable")
        return and_then(self, lambda value: Done(f(value)))

    @staticmethod
    def pure(value: T) -> Program[T]:
        return Done(value)


@dataclass(frozen=True)
class WriteLine(Program[T]):
    """Emit ``text`` as one output line, then continue as ``next``."""

    text: str
    next: Program[T]


@dataclass(frozen=True)
class ReadLine(Program[T]):
    """Read one input line and let ``continuation`` choose the rest of the program."""

    continuation: Callable[[str], Program[T]]


@dataclass(frozen=True)
class Done(Program[T]):
    """Terminal node carrying the program's result."""

    value: T


ConsoleInstruction = Union[WriteLine[T], ReadLine[T], Done[T]]


@dataclass(frozen=True, eq=False)
class _BoundContinuation:
    """A ``ReadLine`` continuation followed by binders, applied in order.

    Binding onto a ``ReadLine`` whose continuation is already bound appends to
    ``binders`` instead of wrapping another closure, so composition and the
    eventual call stay flat no matter how many binds pile up.
    """

    base: Callable[[str], Program[Any]]
    binders: tuple[Callable[[Any], Program[Any]], ...]

    @classmethod
    def extend(
        cls,
        continuation: Callable[[str], Program[Any]],
        binders: tuple[Callable[[Any], Program[Any]], ...],
    ) -> _BoundContinuation:
        if isinstance(continuation, _BoundContinuation):
            return cls(continuation.base, continuation.binders + binders)
        return cls(continuation, binders)

    def __call__(self, line: str) -> Program[Any]:
        program = _ensure_program(self.base(line), "ReadLine continuation")
        return _bind_all(program, self.binders)


def _ensure_program(candidate: Any, origin: str) -> Program[Any]:
    if not isinstance(candidate, Program):
        raise TypeError(
            f"{origin} must return a Program; got {type(candidate).__name__}"
        )
    return candidate


def _bind_all(
    program: Program[Any],
    binders: tuple[Callable[[Any], Program[Any]], ...],
) -> Program[Any]:
    # Apply binders until a read blocks further progress; the read keeps the rest.
    texts: list[str] = []
    node = program
    index = 0
    while True:
        while isinstance(node, WriteLine):
            texts.append(node.text)
            node = node.next
        match node:
            case ReadLine(continuation=continuation):
                tail: Program[Any] = node
                if index < len(binders):
                    tail = ReadLine(_BoundContinuation.extend(continuation, binders[index:]))
                break
            case Done(value=value):
                if index == len(binders):
                    tail = node
                    break
                node = _ensure_program(binders[index](value), "binder")
                index += 1
            case _:
                raise TypeError(f"Unknown console instruction: {node!r}")

    for text in reversed(texts):
        tail = WriteLine(text, tail)
    return tail


def and_then(program: Program[T], f: Callable[[T], Program[U]]) -> Program[U]:
    """Sequence ``program`` with ``f``, substituting ``f(result)`` for the trailing ``Done``.

    * ``WriteLine(text, next)`` keeps its text and binds its tail.
    * ``ReadLine(k)`` stays a read; ``f`` is applied only once the line is known.
    * ``Done(value)`` becomes ``f(value)``.

    The ``WriteLine`` spine is rebuilt with a loop rather than recursion.
    """

    if not callable(f):
        raise TypeError("binder must be callable returning a Program")
    return _bind_all(_ensure_program(program, "and_then"), (f,))


def write_line(text: str) -> Program[None]:
    return WriteLine(text, Done(None))


def read_line() -> Program[str]:
    return ReadLine(Done)


def pure(value: T) -> Program[T]:
    return Done(value)


def sequence(*programs: Program[Any]) -> Program[list[Any]]:
    """Run ``programs`` left to right and collect their results."""

    result: Program[list[Any]] = Done([])
    for program in programs:
        checked = _ensure_program(program, "sequence")
        result = and_then(
            result,
            lambda acc, step=checked: step.map(lambda value, acc=acc: [*acc, value]),
        )
    return result


__all__ = [
    "ConsoleInstruction",
    "Done",
    "Program",
    "ReadLine",
    "WriteLine",
    "and_then",
    "pure",
    "read_line",
    "sequence",
    "write_line",
]
