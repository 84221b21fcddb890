"""Tests for the program model and its constructors."""

from dataclasses import FrozenInstanceError

import pytest

from doconsole import (
    Done,
    Program,
    ReadLine,
    WriteLine,
    pure,
    read_line,
    sequence,
    write_line,
)


def test_write_line_builds_write_then_unit() -> None:
    program = write_line("hello")

    assert program == WriteLine("hello", Done(None))


def test_read_line_continuation_returns_line_unchanged() -> None:
    program = read_line()

    assert isinstance(program, ReadLine)
    assert program.continuation("  spaced  ") == Done("  spaced  ")


def test_pure_and_static_pure_build_done() -> None:
    assert pure(42) == Done(42)
    assert Program.pure("x") == Done("x")


def test_construction_performs_no_io(capsys: pytest.CaptureFixture[str]) -> None:
    write_line("not printed").then(read_line).map(len)

    captured = capsys.readouterr()
    assert captured.out == ""


def test_programs_are_immutable() -> None:
    program = write_line("a")

    with pytest.raises(FrozenInstanceError):
        program.text = "b"  # type: ignore[misc]


def test_composition_does_not_mutate_source() -> None:
    source = write_line("first")
    composed = source.then(write_line("second"))

    assert source == WriteLine("first", Done(None))
    assert composed == WriteLine("first", WriteLine("second", Done(None)))


def test_program_union_is_closed() -> None:
    with pytest.raises(TypeError, match="cannot extend Program"):

        class Beep(Program[None]):
            pass


def test_sequence_collects_results(interpret) -> None:
    program = sequence(pure(1), read_line(), write_line("x").map(lambda _: "written"))

    trace, result = interpret(program, ["line"])

    assert trace == [("read", "line"), ("write", "x")]
    assert result == [1, "line", "written"]


def test_sequence_of_nothing_is_empty_list(interpret) -> None:
    trace, result = interpret(sequence())

    assert trace == []
    assert result == []


def test_sequence_rejects_non_programs() -> None:
    with pytest.raises(TypeError, match="sequence must return a Program"):
        sequence(pure(1), "oops")  # type: ignore[arg-type]
