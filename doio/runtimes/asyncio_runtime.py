"""AsyncioRuntime - Runtime that performs effects as deferred executor tasks."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, TypeVar

from doio.result import Err, Ok
from doio.runtimes.base import RuntimeMixin, RuntimeResult, async_fold_map

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from doio.console import Console
    from doio.effects import IOEffect
    from doio.program import Program

T = TypeVar("T")


class AsyncioRuntime(RuntimeMixin):
    """Non-blocking interpreter built on asyncio.

    Console operations are submitted to ``executor`` (the event loop's default
    executor when ``None``), so a blocking read never stalls the loop. The
    runtime does not own the executor: creating and shutting it down is the
    caller's business.
    """

    def __init__(self, console: Console | None = None, executor: Executor | None = None):
        self._init_console(console)
        self._executor = executor

    async def _perform_async(self, effect: IOEffect[Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._perform, effect)

    async def run(self, program: Program[T]) -> T:
        """Interpret ``program``; raises whatever a failing effect raised."""
        return await async_fold_map(program, self._perform_async)

    def run_async(self, program: Program[T]) -> asyncio.Task[T]:
        """Schedule ``program`` on the running loop and return its task.

        Returns immediately. The task completes with the program's result, or
        with the exception of the first failing step, after which no further
        step is scheduled.
        """
        return asyncio.get_running_loop().create_task(self.run(program))

    async def run_safe(self, program: Program[T]) -> RuntimeResult[T]:
        """Run program, return Result instead of raising."""
        try:
            return RuntimeResult(Ok(await self.run(program)))
        except Exception as e:
            return RuntimeResult(Err(e))


__all__ = ["AsyncioRuntime"]
