"""
Do-notation for doio programs.

The ``@do`` decorator turns a generator function into a function that returns
a Program. Each ``yield`` hands a Program to the interpreter and receives its
result back, which reads like straight-line imperative code while the
underlying value stays a plain ``Sequence`` tree.

Example:
    >>> from doio import do, print_, read
    >>>
    >>> @do
    ... def echo():
    ...     message = yield read()
    ...     yield print_(message)
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Generator
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from doio.combinators import defer
from doio.program import Program, Pure, Sequence

P = ParamSpec("P")
T = TypeVar("T")

ProgramGenerator = Generator[Program[Any], Any, T]


def do(func: Callable[P, ProgramGenerator[T] | Program[T] | T]) -> Callable[P, Program[T]]:
    """Decorate a generator function so that calling it builds a Program.

    Calling the decorated function does not start the generator. A fresh
    generator is created each time an interpreter reaches the program, so the
    same Program value can be interpreted more than once.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Program[T]:
        def start() -> Program[T]:
            result = func(*args, **kwargs)
            if inspect.isgenerator(result):
                return _advance(result, None)
            return Program.lift(result)

        return defer(start)

    return wrapper


def _advance(gen: ProgramGenerator[T], sent: Any) -> Program[T]:
    try:
        yielded = gen.send(sent)
    except StopIteration as stop:
        return Pure(stop.value)

    if not isinstance(yielded, Program):
        gen.close()
        raise TypeError(
            f"@do generator {gen.__name__} must yield Program values; "
            f"got {type(yielded).__name__}"
        )
    return Sequence(yielded, lambda value: _advance(gen, value))


__all__ = ["ProgramGenerator", "do"]
