from __future__ import annotations

import argparse
import asyncio
import importlib
import inspect
import json
import logging
import sys
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from doio.config import INTERPRETERS, Settings
from doio.console import StdConsole
from doio.errors import EffectExecutionError
from doio.program import Program
from doio.runtimes import AsyncioRuntime, SyncRuntime

logger = logging.getLogger("doio")


class ProgramResolutionError(Exception):
    """Raised when --program does not name a Program."""


@dataclass
class RunContext:
    program_path: str
    interpreter: str
    output_format: str
    workers: int


def _import_symbol(path: str) -> Any:
    if ":" in path:
        module_name, attr_path = path.split(":", 1)
        module = importlib.import_module(module_name)
        return _resolve_attr(module, attr_path)
    parts = path.split(".")
    if len(parts) < 2:
        raise ValueError(
            f"'{path}' is not a fully-qualified symbol. Use module.symbol format."
        )
    module = importlib.import_module(".".join(parts[:-1]))
    return getattr(module, parts[-1])


def _resolve_attr(obj: Any, attr_path: str) -> Any:
    current = obj
    for attr in attr_path.split("."):
        current = getattr(current, attr)
    return current


def _ensure_program(obj: Any, description: str) -> Program[Any]:
    if isinstance(obj, Program):
        return obj
    if callable(obj):
        try:
            inspect.signature(obj).bind()
        except TypeError as exc:
            raise ProgramResolutionError(
                f"{description} must take no arguments to build a Program: {exc}"
            ) from exc
        produced = obj()
        if isinstance(produced, Program):
            return produced
    raise ProgramResolutionError(f"{description} did not resolve to a Program instance.")


def _load_program(path: str) -> Program[Any]:
    try:
        obj = _import_symbol(path)
    except (ImportError, AttributeError, ValueError) as exc:
        raise ProgramResolutionError(f"--program {path!r} could not be resolved: {exc}") from exc
    return _ensure_program(obj, "--program")


def _execute(context: RunContext, program: Program[Any]) -> Any:
    console = StdConsole()
    if context.interpreter == "sync":
        return SyncRuntime(console).run(program)

    async def _run_on_executor(executor: ThreadPoolExecutor) -> Any:
        return await AsyncioRuntime(console, executor).run_async(program)

    with ThreadPoolExecutor(max_workers=context.workers, thread_name_prefix="doio") as executor:
        return asyncio.run(_run_on_executor(executor))


def _render_result(value: Any, output_format: str) -> None:
    if output_format == "json":
        try:
            print(json.dumps({"result": value}))
        except TypeError:
            print(json.dumps({"result": repr(value)}))
        return
    if value is not None:
        print(repr(value))


def handle_run(args: argparse.Namespace, settings: Settings) -> int:
    context = RunContext(
        program_path=args.program,
        interpreter=args.interpreter or settings.interpreter,
        output_format=args.format,
        workers=args.workers or settings.workers,
    )
    logger.debug("running %s with the %s interpreter", context.program_path, context.interpreter)

    program = _load_program(context.program_path)
    try:
        value = _execute(context, program)
    except EffectExecutionError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    _render_result(value, context.output_format)
    return 0


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doio", description="Run console programs built with doio")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log effect dispatch on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Execute a Program via an interpreter",
        description=(
            "Execute a Program against the standard console.\n\n"
            "Examples:\n"
            "  doio run --program doio.programs.authorized\n"
            "  doio run --program doio.programs.echo --interpreter async --format json"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    run_parser.add_argument(
        "--program",
        required=True,
        help="Fully-qualified path to a Program, or to a zero-argument callable returning one",
    )
    run_parser.add_argument(
        "--interpreter",
        choices=INTERPRETERS,
        default=None,
        help="Interpreter to use (default: $DOIO_INTERPRETER or sync)",
    )
    run_parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Executor threads for the async interpreter (default: $DOIO_WORKERS or 1)",
    )
    run_parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    run_parser.set_defaults(func=handle_run)
    return parser


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    _configure_logging(args.verbose or settings.debug)
    try:
        return args.func(args, settings)
    except ProgramResolutionError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
