"""
Pytest configuration for doio interpreter tests.

Provides a parameterized fixture so the same test cases run against both
SyncRuntime and AsyncioRuntime.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

import pytest

from doio.console import Console
from doio.program import Program
from doio.runtimes import AsyncioRuntime, SyncRuntime

T = TypeVar("T")


class Interpreter(Protocol):
    """Protocol for interpreter adapters used in tests."""

    async def run(self, program: Program[T], console: Console) -> T: ...


class SyncInterpreterAdapter:
    """Adapter exposing SyncRuntime through an awaitable interface."""

    async def run(self, program: Program[T], console: Console) -> T:
        return SyncRuntime(console).run(program)


class AsyncInterpreterAdapter:
    """Adapter awaiting the task returned by AsyncioRuntime.run_async."""

    async def run(self, program: Program[T], console: Console) -> T:
        return await AsyncioRuntime(console).run_async(program)


@pytest.fixture(params=["sync", "async"])
def interpreter(request: pytest.FixtureRequest) -> Interpreter:
    """Parameterized fixture providing both interpreter implementations."""
    if request.param == "sync":
        return SyncInterpreterAdapter()
    return AsyncInterpreterAdapter()


class ExplodingConsole:
    """Console that fails the test if any operation is attempted."""

    def write_line(self, message: str) -> None:
        raise AssertionError(f"unexpected write_line({message!r})")

    def read_line(self) -> str:
        raise AssertionError("unexpected read_line()")


@pytest.fixture
def exploding_console() -> ExplodingConsole:
    return ExplodingConsole()
