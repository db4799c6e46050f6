"""Console capability used by interpreters to perform effects."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable

from doio.errors import EndOfInputError, OutputClosedError


@runtime_checkable
class Console(Protocol):
    """Line-oriented console I/O.

    ``write_line`` appends the message and a line terminator to the output.
    ``read_line`` blocks until one line is available and returns it without
    its terminator. Implementations raise :class:`~doio.errors.EndOfInputError`
    when no line can be read and :class:`~doio.errors.OutputClosedError` when
    the output is closed.
    """

    def write_line(self, message: str) -> None: ...

    def read_line(self) -> str: ...


class StdConsole:
    """Console over text streams, ``sys.stdin``/``sys.stdout`` by default.

    Default streams are looked up on every call so that redirections of
    ``sys.stdout`` (pytest's ``capsys`` for instance) are honoured.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write_line(self, message: str) -> None:
        stream = self.stdout
        try:
            stream.write(f"{message}\n")
            stream.flush()
        except ValueError as exc:  # I/O operation on closed file
            raise OutputClosedError() from exc
        except BrokenPipeError as exc:
            raise OutputClosedError("output pipe was closed by the reader") from exc

    def read_line(self) -> str:
        stream = self.stdin
        try:
            line = stream.readline()
        except ValueError as exc:
            raise EndOfInputError("input stream is closed") from exc
        if not line:
            raise EndOfInputError()
        if line.endswith("\n"):
            line = line[:-1].removesuffix("\r")
        return line


__all__ = ["Console", "StdConsole"]
