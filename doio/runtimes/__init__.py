"""Runtime implementations for doio program execution.

Two runtime types share one program representation:
- SyncRuntime: performs effects inline, blocking the caller
- AsyncioRuntime: performs effects as executor tasks chained on an event loop
"""

from doio.runtimes.base import RuntimeMixin, RuntimeResult, async_fold_map, fold_map
from doio.runtimes.asyncio_runtime import AsyncioRuntime
from doio.runtimes.sync import SyncRuntime

__all__ = [
    "AsyncioRuntime",
    "RuntimeMixin",
    "RuntimeResult",
    "SyncRuntime",
    "async_fold_map",
    "fold_map",
]
