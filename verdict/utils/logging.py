from __future__ import annotations

"""Library logger wired to a rich handler.

Only the ``verdict`` logger is touched; the root logger is left alone so
host applications keep control of their own logging setup.
"""

from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR

from rich.logging import RichHandler

from verdict.config import get_settings

__all__ = ["get", "log"]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("verdict")

# Attach once, even if this module gets reloaded
if not any(isinstance(h, RichHandler) for h in log.handlers):
    log.addHandler(RichHandler(rich_tracebacks=True, markup=False, show_path=False))


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the verdict logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("verdict")
    lg.setLevel(lvl)
    return lg


get(get_settings().log_level)
