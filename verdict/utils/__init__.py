"""verdict utilities."""

from .render import describe

__all__ = [
    "describe",
]
