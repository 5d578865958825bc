from __future__ import annotations

"""Bridges between raising code and Result values.

* :func:`from_awaitable` – await a coroutine/task/future, capture its outcome
* :func:`from_future`    – same for a ``concurrent.futures.Future`` (blocking)
* :func:`attempt`        – call a plain function, capture its outcome
* :func:`run_in_thread`  – run a blocking function on a worker thread (anyio)

Only ``Exception`` subclasses are captured. Cancellation and interpreter
exits (``CancelledError``, ``KeyboardInterrupt``, ``SystemExit``) keep
propagating: they come from the scheduler, not from the wrapped work.
"""

from concurrent.futures import Future
from functools import partial
from typing import Any, Awaitable, Callable, TypeVar

import anyio

from verdict.core.errors import Rejection
from verdict.core.result import Result, err, ok
from verdict.utils.logging import log

T = TypeVar("T")

__all__ = ["from_awaitable", "from_future", "attempt", "run_in_thread"]


def _captured(exc: Exception, source: str) -> Result[Any, Any]:
    # Rejection only exists to carry a non-exception payload through a raise
    error = exc.error if isinstance(exc, Rejection) else exc
    log.debug("%s captured failure: %r", source, error)
    return err(error)


async def from_awaitable(awaitable: Awaitable[T]) -> Result[T, Any]:
    """Await *awaitable* once and return its outcome as a Result.

    Fulfilment becomes ``Ok(value)``; a raised exception becomes
    ``Err(exc)``. The returned coroutine does not raise for failures of
    *awaitable*. No timeout or retry is added.
    """
    try:
        value = await awaitable
    except Exception as exc:  # noqa: BLE001
        return _captured(exc, "from_awaitable")
    return ok(value)


def from_future(future: "Future[T]") -> Result[T, Any]:
    """Block until *future* settles and return its outcome as a Result.

    A cancelled future raises ``CancelledError`` like ``Future.result`` does.
    """
    exc = future.exception()
    if exc is None:
        return ok(future.result())
    if not isinstance(exc, Exception):
        raise exc
    return _captured(exc, "from_future")


def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Any]:
    """Call ``fn(*args, **kwargs)``; return ``Ok(result)`` or ``Err(exc)``."""
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001
        return _captured(exc, getattr(fn, "__name__", "attempt"))
    return ok(value)


async def run_in_thread(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Any]:
    """Run blocking *fn* on a worker thread and capture its outcome."""
    return await anyio.to_thread.run_sync(partial(attempt, fn, *args, **kwargs))
