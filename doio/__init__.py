"""
doio - Console effects as data, with interchangeable interpreters.

Programs are inert trees of Effect, Pure and Sequence nodes. Building one
performs no I/O; an interpreter walks it later, either synchronously or as an
asyncio task.

Example:
    >>> from doio import bind, print_, pure, read, run
    >>>
    >>> greet = bind(read(), lambda name: print_(f"Hello, {name}!"))
    >>> run(greet)  # reads a line from stdin, then prints the greeting
"""

from doio.combinators import (
    bind,
    defer,
    map_,
    print_,
    pure,
    read,
    sequence,
    then,
    traverse,
)
from doio.console import Console, StdConsole
from doio.do import ProgramGenerator, do
from doio.effects import ConsoleEffect, IOEffect, PrintEffect, ReadEffect
from doio.errors import EffectExecutionError, EndOfInputError, OutputClosedError
from doio.interpreter import run, run_async
from doio.program import Effect, Program, Pure, Sequence
from doio.result import Err, Ok, Result
from doio.runtimes import AsyncioRuntime, RuntimeResult, SyncRuntime, async_fold_map, fold_map

__version__ = "0.1.0"

__all__ = [
    # Effects
    "ConsoleEffect",
    "IOEffect",
    "PrintEffect",
    "ReadEffect",
    # Programs
    "Effect",
    "Program",
    "Pure",
    "Sequence",
    # Combinators
    "bind",
    "defer",
    "do",
    "map_",
    "print_",
    "pure",
    "read",
    "sequence",
    "then",
    "traverse",
    "ProgramGenerator",
    # Console
    "Console",
    "StdConsole",
    # Interpreters
    "AsyncioRuntime",
    "RuntimeResult",
    "SyncRuntime",
    "async_fold_map",
    "fold_map",
    "run",
    "run_async",
    # Errors and results
    "EffectExecutionError",
    "EndOfInputError",
    "OutputClosedError",
    "Err",
    "Ok",
    "Result",
]
