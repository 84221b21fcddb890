from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TextIO

from loguru import logger

from doconsole.config import InterpreterConfig
from doconsole.errors import ConsoleIOError
from doconsole.examples import DEFAULT_RUN_ORDER, EXAMPLES
from doconsole.handlers import StdioConsole
from doconsole.interpreter import ConsoleInterpreter

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2


@dataclass
class Streams:
    stdin: TextIO
    stdout: TextIO
    stderr: TextIO


class UnknownExampleError(LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unknown example {name!r}; available: {', '.join(EXAMPLES)}"
        )


def configure_logging(config: InterpreterConfig, stderr: TextIO) -> None:
    """Send driver logs (loguru) and library logs (stdlib) to ``stderr``."""

    logger.remove()
    logger.add(stderr, level=config.log_level, format="{level: <8} | {message}")
    logging.basicConfig(
        level=config.log_level,
        stream=stderr,
        format="%(levelname)-8s | %(name)s | %(message)s",
        force=True,
    )


def resolve_examples(names: Iterable[str]) -> list[str]:
    selected = list(names) or list(DEFAULT_RUN_ORDER)
    for name in selected:
        if name not in EXAMPLES:
            raise UnknownExampleError(name)
    return selected


def handle_run(args: argparse.Namespace, streams: Streams) -> int:
    config: InterpreterConfig = args.config
    names = resolve_examples(args.names)
    interpreter = ConsoleInterpreter(
        StdioConsole(stdin=streams.stdin, stdout=streams.stdout),
        config,
    )
    for name in names:
        title, program = EXAMPLES[name]
        logger.info("Running example {}", name)
        print(title, file=streams.stdout)
        result: Any = interpreter.run(program)
        if config.show_result:
            print(result, file=streams.stdout)
        print(config.separator, file=streams.stdout)
        logger.debug("Example {} returned {!r}", name, result)
    return EXIT_OK


def handle_list(_args: argparse.Namespace, streams: Streams) -> int:
    for name, (title, _program) in EXAMPLES.items():
        print(f"{name:<12} {title}", file=streams.stdout)
    return EXIT_OK


def _add_logging_options(parser: argparse.ArgumentParser, default: Any) -> None:
    # Subcommands use SUPPRESS so an option given before the subcommand is not reset.
    parser.add_argument(
        "--log-level",
        default=default,
        help="Log level for stderr diagnostics (env: DOCONSOLE_LOG_LEVEL)",
    )
    parser.add_argument(
        "--trace-steps",
        action="store_true",
        default=default,
        help="Log every interpreted instruction at DEBUG level",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doconsole",
        description="Run example console programs built with the doconsole DSL.",
    )
    _add_logging_options(parser, None)
    parser.set_defaults(func=handle_run, names=[], separator=None, show_result=None)
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Interpret example programs")
    _add_logging_options(run_parser, argparse.SUPPRESS)
    run_parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help=f"Examples to run (default: {' '.join(DEFAULT_RUN_ORDER)})",
    )
    run_parser.add_argument(
        "--separator",
        default=None,
        help="Line printed after each example (env: DOCONSOLE_SEPARATOR)",
    )
    run_parser.add_argument(
        "--no-result",
        dest="show_result",
        action="store_const",
        const=False,
        default=None,
        help="Do not print each program's result value",
    )
    run_parser.set_defaults(func=handle_run)

    list_parser = subparsers.add_parser("list", help="List available examples")
    _add_logging_options(list_parser, argparse.SUPPRESS)
    list_parser.set_defaults(func=handle_list)

    return parser


def main(
    argv: Iterable[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    streams = Streams(
        stdin=stdin if stdin is not None else sys.stdin,
        stdout=stdout if stdout is not None else sys.stdout,
        stderr=stderr if stderr is not None else sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    args.config = InterpreterConfig.from_env(
        log_level=args.log_level,
        trace_steps=args.trace_steps,
        separator=args.separator,
        show_result=args.show_result,
    )
    configure_logging(args.config, streams.stderr)

    try:
        return args.func(args, streams)
    except UnknownExampleError as exc:
        logger.error("{}", exc)
        return EXIT_USAGE
    except ConsoleIOError as exc:
        logger.error("Interpretation aborted: {}", exc)
        return EXIT_IO_ERROR


if __name__ == "__main__":
    sys.exit(main())
