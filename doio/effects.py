"""Console effects.

An effect is an inert description of one primitive console operation. It is
parameterised by the type of value the operation yields once an interpreter
performs it.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


class IOEffect(ABC, Generic[T]):
    """Base class for the closed set of console effects."""

    __slots__ = ()


@dataclass(frozen=True)
class PrintEffect(IOEffect[None]):
    """Emits ``message`` as one line on the console output."""

    message: str


@dataclass(frozen=True)
class ReadEffect(IOEffect[str]):
    """Reads one line from the console input."""


ConsoleEffect: TypeAlias = PrintEffect | ReadEffect


__all__ = [
    "ConsoleEffect",
    "IOEffect",
    "PrintEffect",
    "ReadEffect",
]
