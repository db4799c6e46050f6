"""SyncRuntime - Runtime that performs effects inline on the calling thread."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from doio.result import Err, Ok
from doio.runtimes.base import RuntimeMixin, RuntimeResult, fold_map

if TYPE_CHECKING:
    from doio.console import Console
    from doio.program import Program

T = TypeVar("T")


class SyncRuntime(RuntimeMixin):
    """Blocking interpreter.

    Every effect runs to completion before the next continuation is called.
    A read blocks the calling thread until the console yields a line, with no
    timeout. Console failures propagate to the caller unchanged.
    """

    def __init__(self, console: Console | None = None):
        self._init_console(console)

    def run(self, program: Program[T]) -> T:
        return fold_map(program, self._perform)

    def run_safe(self, program: Program[T]) -> RuntimeResult[T]:
        try:
            return RuntimeResult(Ok(self.run(program)))
        except Exception as e:
            return RuntimeResult(Err(e))


__all__ = ["SyncRuntime"]
