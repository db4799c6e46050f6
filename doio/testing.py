"""In-memory console for tests and simulations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from doio.errors import EndOfInputError, OutputClosedError


class ScriptedConsole:
    """Console that answers reads from a script and records every operation.

    ``trace`` lists ``("write", message)`` and ``("read", line)`` events in
    the order they were performed.
    """

    def __init__(self, inputs: Iterable[str] = ()) -> None:
        self._inputs = deque(inputs)
        self._output_closed = False
        self.trace: list[tuple[str, str]] = []

    @property
    def outputs(self) -> list[str]:
        return [message for kind, message in self.trace if kind == "write"]

    @property
    def reads(self) -> list[str]:
        return [line for kind, line in self.trace if kind == "read"]

    @property
    def remaining_inputs(self) -> list[str]:
        return list(self._inputs)

    def close_output(self) -> None:
        self._output_closed = True

    def write_line(self, message: str) -> None:
        if self._output_closed:
            raise OutputClosedError()
        self.trace.append(("write", message))

    def read_line(self) -> str:
        if not self._inputs:
            raise EndOfInputError()
        line = self._inputs.popleft()
        self.trace.append(("read", line))
        return line


__all__ = ["ScriptedConsole"]
