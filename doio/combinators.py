"""Smart constructors and sequencing combinators for console programs.

None of these functions perform I/O; they only build Program values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from doio.effects import PrintEffect, ReadEffect
from doio.program import Effect, Program, Pure, Sequence

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")


def print_(message: str) -> Program[None]:
    return Effect(PrintEffect(message))


def read() -> Program[str]:
    return Effect(ReadEffect())


def pure(value: T) -> Program[T]:
    return Pure(value)


def bind(program: Program[S], continuation: Callable[[S], Program[T]]) -> Program[T]:
    """Sequence ``program`` with a continuation that picks the next program."""

    return Sequence(program, continuation)


def map_(program: Program[S], f: Callable[[S], T]) -> Program[T]:
    return bind(program, lambda value: pure(f(value)))


def then(first: Program[S], second: Program[T]) -> Program[T]:
    """Run ``first`` then ``second``; the result of ``first`` is discarded."""

    return bind(first, lambda _: second)


def defer(thunk: Callable[[], Program[T]]) -> Program[T]:
    """Build the program lazily, only once an interpreter reaches it."""

    return bind(pure(None), lambda _: thunk())


def sequence(programs: Iterable[Program[T]]) -> Program[list[T]]:
    """Run ``programs`` left to right and collect their results in order."""

    # Results are accumulated as nested (value, rest) pairs and flattened once.
    collected: Program[tuple | None] = pure(None)
    for program in programs:
        collected = _push(collected, program)
    return map_(collected, _flatten)


def _push(collected: Program[tuple | None], program: Program[T]) -> Program[tuple | None]:
    return bind(collected, lambda rest: map_(program, lambda value: (value, rest)))


def _flatten(cell: tuple | None) -> list:
    values = []
    while cell is not None:
        value, cell = cell
        values.append(value)
    values.reverse()
    return values


def traverse(items: Iterable[T], f: Callable[[T], Program[U]]) -> Program[list[U]]:
    return sequence([f(item) for item in items])


__all__ = [
    "bind",
    "defer",
    "map_",
    "print_",
    "pure",
    "read",
    "sequence",
    "then",
    "traverse",
]
