"""Environment-driven settings for the doio command line.

    export DOIO_DEBUG=1           # debug logging on stderr
    export DOIO_INTERPRETER=async # default interpreter (sync or async)
    export DOIO_WORKERS=1         # executor threads for the async interpreter
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

InterpreterName = Literal["sync", "async"]

INTERPRETERS: tuple[InterpreterName, ...] = ("sync", "async")

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    interpreter: InterpreterName = "sync"
    workers: int = 1

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        debug = env.get("DOIO_DEBUG", "").strip().lower() in _TRUTHY

        interpreter = env.get("DOIO_INTERPRETER", "sync").strip().lower()
        if interpreter not in INTERPRETERS:
            raise ValueError(
                f"DOIO_INTERPRETER must be one of {', '.join(INTERPRETERS)}; got {interpreter!r}"
            )

        raw_workers = env.get("DOIO_WORKERS", "1").strip()
        try:
            workers = int(raw_workers)
        except ValueError:
            raise ValueError(
                f"DOIO_WORKERS must be a positive integer; got {raw_workers!r}"
            ) from None
        if workers < 1:
            raise ValueError(f"DOIO_WORKERS must be a positive integer; got {workers}")

        return cls(debug=debug, interpreter=interpreter, workers=workers)


__all__ = ["INTERPRETERS", "InterpreterName", "Settings"]
