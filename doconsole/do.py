"""
The do decorator for doconsole.

Turns a generator function that yields ``Program`` values into a function
returning a ``Program``, giving console programs a do-notation:

    @do
    def greet():
        yield write_line("What's your name?")
        name = yield read_line()
        yield write_line(f"Hello {name}")
        return len(name)

Programs must stay inert and re-runnable, but a Python generator can only be
advanced once. Each resumption after a read therefore starts a fresh generator
and replays the values already sent to it. Decorated bodies must be
deterministic and must not perform side effects of their own.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from dataclasses import dataclass
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from doconsole.program import Done, Program, ReadLine, WriteLine, and_then

P = ParamSpec("P")
T = TypeVar("T")

ConsoleGenerator = Generator[Program[Any], Any, T]


@dataclass(frozen=True, eq=False)
class _Resume:
    """Continue a do-block from scratch, replaying ``history`` into a new generator."""

    func: Callable[..., Any]
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    history: tuple[Any, ...]

    def __call__(self, value: Any) -> Program[Any]:
        return _start(self.func, self.args, self.kwargs, self.history + (value,))


def _start(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    history: tuple[Any, ...],
) -> Program[Any]:
    gen_or_value = func(*args, **kwargs)
    if not inspect.isgenerator(gen_or_value):
        if isinstance(gen_or_value, Program):
            return gen_or_value
        return Done(gen_or_value)

    gen = gen_or_value
    try:
        current = next(gen)
        for sent_value in history:
            current = gen.send(sent_value)
    except StopIteration as stop_exc:
        return Done(stop_exc.value)

    texts: list[str] = []
    sent = history
    while True:
        if not isinstance(current, Program):
            gen.close()
            raise TypeError(
                f"@do function {getattr(func, '__qualname__', func)!r} yielded "
                f"{type(current).__name__}; only Programs may be yielded"
            )
        node: Program[Any] = current
        while isinstance(node, WriteLine):
            texts.append(node.text)
            node = node.next

        match node:
            case ReadLine():
                gen.close()
                tail = and_then(node, _Resume(func, args, kwargs, sent))
                break
            case Done(value=value):
                sent = sent + (value,)
                try:
                    current = gen.send(value)
                except StopIteration as stop_exc:
                    tail = Done(stop_exc.value)
                    break
            case _:
                gen.close()
                raise TypeError(f"Unknown console instruction: {node!r}")

    for text in reversed(texts):
        tail = WriteLine(text, tail)
    return tail


def do(func: Callable[P, ConsoleGenerator[T]]) -> Callable[P, Program[T]]:
    """Decorate a generator function so calling it builds a ``Program``.

    ``x = yield program`` binds ``program``'s result to ``x``; the generator's
    return value becomes the program's result. A plain (non-generator)
    function is lifted with ``pure``.
    """

    @wraps(func)
    def build(*args: P.args, **kwargs: P.kwargs) -> Program[T]:
        return _start(func, args, dict(kwargs), ())

    return build


__all__ = ["ConsoleGenerator", "do"]
