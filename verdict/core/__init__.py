"""Result type and the helpers that convert raising code into Results."""

from verdict.core.errors import ResultError, UnwrapError, Rejection
from verdict.core.result import Ok, Err, Result, ok, err
from verdict.core.deferred import from_awaitable, from_future, attempt, run_in_thread

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "from_awaitable",
    "from_future",
    "attempt",
    "run_in_thread",
    "ResultError",
    "UnwrapError",
    "Rejection",
]
