from __future__ import annotations


class EffectExecutionError(Exception):
    """Raised when the console resource behind an effect fails."""


class EndOfInputError(EffectExecutionError, EOFError):
    """Raised when a read finds the input stream exhausted or closed."""

    def __init__(self, message: str = "end of input: no line available to read") -> None:
        super().__init__(message)


class OutputClosedError(EffectExecutionError):
    """Raised when a write targets a closed output stream."""

    def __init__(self, message: str = "output stream is closed") -> None:
        super().__init__(message)


__all__ = ["EffectExecutionError", "EndOfInputError", "OutputClosedError"]
