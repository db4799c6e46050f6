"""
Free-standing entry points for interpreting programs.

Programs never reference an interpreter; the same value can be passed to
either function below, or to a runtime instance directly.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, TypeVar

from doio.runtimes import AsyncioRuntime, SyncRuntime

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from doio.console import Console
    from doio.program import Program

T = TypeVar("T")


def run(program: Program[T], console: Console | None = None) -> T:
    """Run ``program`` synchronously on the calling thread."""

    return SyncRuntime(console).run(program)


def run_async(
    program: Program[T],
    console: Console | None = None,
    executor: Executor | None = None,
) -> asyncio.Task[T]:
    """Schedule ``program`` on the running event loop and return its task."""

    return AsyncioRuntime(console, executor).run_async(program)


__all__ = ["run", "run_async"]
