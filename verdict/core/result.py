from __future__ import annotations

"""Result: a closed union of `Ok` (success) and `Err` (failure).

Used to propagate expected failures as data instead of raising at the
first problem. Both variants are frozen dataclasses exposing the same
method set, so code can chain ``map`` / ``and_then`` without checking the
variant first, and match on the variant where it needs to decide::

    match parse(text):
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from verdict.core.errors import Rejection, UnwrapError
from verdict.utils.logging import log
from verdict.utils.render import describe

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

__all__ = ["Ok", "Err", "Result", "ok", "err"]


def _raisable(error: Any) -> BaseException:
    """Return *error* itself if it is an ordinary exception, else wrap it.

    Interrupts and cancellations are wrapped too, so awaiting the result
    never cancels or stops the caller.
    """
    if isinstance(error, Exception):
        return error
    return Rejection(error)


@dataclass(slots=True, frozen=True)
class Ok(Generic[T, E]):
    """Success variant holding *value*."""

    value: T

    # ------------------------------------------------------------------ #
    def is_ok(self) -> bool:  # noqa: D102
        return True

    def is_err(self) -> bool:  # noqa: D102
        return False

    is_success = is_ok
    is_failure = is_err

    # ------------------------------------------------------------------ #
    def unwrap(self) -> T:  # noqa: D102
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise :class:`UnwrapError`: there is no error to extract."""
        msg = f"Called unwrap_err on an Ok value: {describe(self.value)}"
        log.debug(msg)
        raise UnwrapError(msg, self)

    # ------------------------------------------------------------------ #
    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        """Return ``Ok(fn(value))``."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> "Result[T, F]":  # noqa: ARG002
        """Return a copy of this Ok; *fn* is not called."""
        return Ok(self.value)

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Return ``fn(value)`` as is.

        Raises ``TypeError`` if *fn* does not return an `Ok` or `Err`.
        """
        out = fn(self.value)
        if not isinstance(out, (Ok, Err)):
            raise TypeError(
                f"and_then callback must return Ok or Err, got {type(out).__name__}"
            )
        return out

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Call *ok* with the value and return what it returns."""
        return ok(self.value)

    # ------------------------------------------------------------------ #
    async def as_awaitable(self) -> T:
        """Resolve with the value."""
        return self.value

    def as_future(self) -> "Future[T]":
        """Return a future already resolved with the value."""
        fut: Future[T] = Future()
        fut.set_result(self.value)
        return fut


@dataclass(slots=True, frozen=True)
class Err(Generic[T, E]):
    """Failure variant holding *error*."""

    error: E

    # ------------------------------------------------------------------ #
    def is_ok(self) -> bool:  # noqa: D102
        return False

    def is_err(self) -> bool:  # noqa: D102
        return True

    is_success = is_ok
    is_failure = is_err

    # ------------------------------------------------------------------ #
    def unwrap(self) -> NoReturn:
        """Raise :class:`UnwrapError` describing the wrapped error.

        An exception payload is chained as ``__cause__`` so its traceback
        stays visible.
        """
        msg = f"Called unwrap on an Err value: {describe(self.error)}"
        log.debug(msg)
        if isinstance(self.error, BaseException):
            raise UnwrapError(msg, self) from self.error
        raise UnwrapError(msg, self)

    def unwrap_or(self, default: T) -> T:  # noqa: D102
        return default

    def unwrap_err(self) -> E:  # noqa: D102
        return self.error

    # ------------------------------------------------------------------ #
    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":  # noqa: ARG002
        return Err(self.error)

    def map_err(self, fn: Callable[[E], F]) -> "Result[T, F]":
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":  # noqa: ARG002
        return Err(self.error)

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        return err(self.error)

    # ------------------------------------------------------------------ #
    async def as_awaitable(self) -> T:
        """Raise the error (wrapped in `Rejection` unless it is an exception)."""
        raise _raisable(self.error)

    def as_future(self) -> "Future[T]":
        fut: Future[T] = Future()
        fut.set_exception(_raisable(self.error))
        return fut


Result = Union[Ok[T, E], Err[T, E]]


# Convenience constructors ------------------------------------------------- #

def ok(value: T) -> Result[T, Any]:  # noqa: D401
    """Wrap *value* in the success variant."""
    return Ok(value)


def err(error: E) -> Result[Any, E]:  # noqa: D401
    """Wrap *error* in the failure variant."""
    return Err(error)
