"""Shared runtime machinery and result types."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from doio.console import Console, StdConsole
from doio.effects import ConsoleEffect, IOEffect, PrintEffect, ReadEffect
from doio.program import Effect, Program, Pure, Sequence
from doio.result import Err, Ok, Result

T = TypeVar("T")

logger = logging.getLogger(__name__)

Continuation = Callable[[Any], Program[Any]]


def _descend(program: Program[Any], pending: list[Continuation]) -> Effect[Any] | Pure[Any]:
    """Walk down the ``first`` spine of ``program`` to its leftmost leaf.

    Continuations met on the way are pushed onto ``pending``; the innermost
    one ends up on top, so popping resumes in left-to-right order.
    """

    current = program
    while True:
        match current:
            case Sequence(first=first, continuation=continuation):
                pending.append(continuation)
                current = first
            case Effect() | Pure():
                return current
            case _:
                raise TypeError(
                    f"Expected a Program node, got {type(current).__name__}: {current!r}"
                )


def fold_map(program: Program[T], handler: Callable[[IOEffect[Any]], Any]) -> T:
    """Interpret ``program`` by mapping every effect through ``handler``.

    Pending continuations are kept on an explicit work list rather than the
    Python call stack, so arbitrarily long ``Sequence`` chains are safe.
    """

    pending: list[Continuation] = []
    current: Program[Any] = program
    while True:
        leaf = _descend(current, pending)
        if isinstance(leaf, Pure):
            value = leaf.value
        else:
            logger.debug("effect: %r", leaf.effect)
            value = handler(leaf.effect)
        if not pending:
            return value
        current = pending.pop()(value)


async def async_fold_map(
    program: Program[T],
    handler: Callable[[IOEffect[Any]], Awaitable[Any]],
) -> T:
    """Asynchronous counterpart of :func:`fold_map`.

    Each effect is awaited before the continuation that depends on it is
    called, so a later effect is never started before an earlier one ends.
    """

    pending: list[Continuation] = []
    current: Program[Any] = program
    while True:
        leaf = _descend(current, pending)
        if isinstance(leaf, Pure):
            value = leaf.value
        else:
            logger.debug("effect: %r", leaf.effect)
            value = await handler(leaf.effect)
        if not pending:
            return value
        current = pending.pop()(value)


@dataclass(frozen=True)
class RuntimeResult(Generic[T]):
    """Result from runtime execution. Used by run_safe()."""

    result: Result[T]

    @property
    def is_ok(self) -> bool:
        return isinstance(self.result, Ok)

    @property
    def is_err(self) -> bool:
        return isinstance(self.result, Err)

    def unwrap(self) -> T:
        """Get value or raise if error."""
        return self.result.unwrap()

    def unwrap_err(self) -> Exception:
        """Get error or raise if ok."""
        return self.result.unwrap_err()

    def display(self) -> str:
        if self.is_ok:
            return f"Ok({self.result.ok()!r})"
        error = self.result.err()
        return f"Err({type(error).__name__}: {error})"


class RuntimeMixin:
    """Console wiring shared by all runtime implementations."""

    _console: Console

    def _init_console(self, console: Console | None = None) -> None:
        self._console = console if console is not None else StdConsole()

    @property
    def console(self) -> Console:
        return self._console

    def _perform(self, effect: ConsoleEffect) -> Any:
        match effect:
            case PrintEffect(message=message):
                self._console.write_line(message)
                return None
            case ReadEffect():
                return self._console.read_line()
            case _:
                raise TypeError(f"Unknown effect: {effect!r}")


__all__ = [
    "Continuation",
    "RuntimeMixin",
    "RuntimeResult",
    "async_fold_map",
    "fold_map",
]
