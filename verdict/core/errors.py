from __future__ import annotations

"""Exceptions raised by verdict itself.

Domain failures never show up here: they travel as data inside `Err`.
Everything below signals a contract violation at the call site.
"""

from typing import Any

__all__ = ["ResultError", "UnwrapError", "Rejection"]


class ResultError(RuntimeError):
    """Base class for every exception raised by verdict."""


class UnwrapError(ResultError):
    """Raised when the wrong variant is extracted from a Result."""

    def __init__(self, message: str, result: Any):
        super().__init__(message)
        self.result = result


class Rejection(ResultError):
    """Carries a non-exception failure payload through a ``raise``.

    Python can only raise exceptions, so ``err("boom").as_awaitable()``
    raises ``Rejection`` with ``.error == "boom"``. The conversion helpers
    unwrap it again.
    """

    def __init__(self, error: Any):
        from verdict.utils.render import describe

        super().__init__(describe(error))
        self.error = error
