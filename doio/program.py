"""
Program types for the doio system.

A Program is an immutable tree describing a console computation. Building one
never performs I/O; effects happen only when an interpreter walks the tree.
The tree is a closed union of three node types:

- :class:`Effect` wraps a single primitive :class:`~doio.effects.IOEffect`.
- :class:`Pure` yields a value without performing any effect.
- :class:`Sequence` runs ``first`` and feeds its result to ``continuation``,
  which returns the program that produces the overall result.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from doio.effects import IOEffect

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")


class Program(ABC, Generic[T]):
    """Base class for all program nodes."""

    __slots__ = ()

    def flat_map(self, f: Callable[[T], Program[U]]) -> Program[U]:
        """Monadic bind: continue with the program ``f`` derives from the result."""

        return Sequence(self, f)

    def map(self, f: Callable[[T], U]) -> Program[U]:
        """Map a function over this program's result."""

        return Sequence(self, lambda value: Pure(f(value)))

    def then(self, next_program: Program[U]) -> Program[U]:
        """Run ``next_program`` after this one, discarding this result."""

        return Sequence(self, lambda _: next_program)

    @staticmethod
    def pure(value: T) -> Program[T]:
        return Pure(value)

    @staticmethod
    def lift(value: Program[U] | U) -> Program[U]:
        if isinstance(value, Program):
            return value
        return Pure(value)


@dataclass(frozen=True)
class Effect(Program[T]):
    """Program consisting of exactly one primitive effect."""

    effect: IOEffect[T]


@dataclass(frozen=True)
class Pure(Program[T]):
    """Program that performs no effect and yields ``value``."""

    value: T


@dataclass(frozen=True)
class Sequence(Program[T], Generic[S, T]):
    """Program that runs ``first`` and continues with ``continuation(result)``.

    The continuation is only called by an interpreter, after ``first`` has
    completed, so later steps may depend on earlier results.
    """

    first: Program[S]
    continuation: Callable[[S], Program[T]]


__all__ = [
    "Effect",
    "Program",
    "Pure",
    "Sequence",
]
