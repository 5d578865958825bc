from __future__ import annotations

"""verdict.utils.render
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Human-readable rendering of arbitrary payloads for error messages.

* exceptions render as ``TypeName: message``
* strings render verbatim
* anything else goes through ``repr()``

Output is clipped to ``Settings.repr_limit`` characters (``0`` = no limit).
"""

from typing import Any

__all__ = ["describe"]

_ELLIPSIS = "…"


def describe(payload: Any, limit: int | None = None) -> str:  # noqa: D401
    """Return a one-line rendering of *payload*, clipped to *limit*."""
    if isinstance(payload, BaseException):
        msg = str(payload)
        text = f"{type(payload).__name__}: {msg}" if msg else type(payload).__name__
    elif isinstance(payload, str):
        text = payload
    else:
        text = repr(payload)

    if limit is None:
        from verdict.config import get_settings

        limit = get_settings().repr_limit

    if limit and len(text) > limit:
        return text[: max(limit - len(_ELLIPSIS), 0)] + _ELLIPSIS
    return text
