from __future__ import annotations

"""Process-wide settings for verdict.

Settings are resolved lazily from the environment on first use and can be
overridden at runtime with :func:`configure` or from a YAML file with
:func:`load_settings_from_yaml`.

Environment variables::

    VERDICT_REPR_LIMIT   max characters of a payload in error messages
    VERDICT_LOG_LEVEL    debug | info | warning | error
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

__all__ = [
    "Settings",
    "get_settings",
    "configure",
    "load_settings_from_yaml",
    "reset_settings",
]

_ENV_PREFIX = "VERDICT_"
_LEVELS = ("debug", "info", "warning", "error")

_ACTIVE: Optional["Settings"] = None


class Settings(BaseModel):  # noqa: D101 – self-documenting via fields
    model_config = {"frozen": True, "extra": "forbid"}

    # Max length of a rendered payload in UnwrapError messages (0 = unlimited)
    repr_limit: int = Field(default=200, ge=0)
    log_level: str = "warning"

    @field_validator("log_level")
    @classmethod
    def check_level(cls, v: str) -> str:
        lvl = v.strip().lower()
        if lvl not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}; got '{v}'")
        return lvl


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #

def _from_env() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(f"{_ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw
    return values


def get_settings() -> Settings:
    """Return the active settings, building them from the environment once."""
    global _ACTIVE
    if _ACTIVE is None:
        try:
            _ACTIVE = Settings(**_from_env())
        except ValidationError as e:
            warnings.warn(
                f"Ignoring invalid {_ENV_PREFIX}* environment settings, using defaults: {e}",
                UserWarning,
            )
            _ACTIVE = Settings()
    return _ACTIVE


def configure(**overrides: Any) -> Settings:  # noqa: D401
    """Replace the active settings with *overrides* applied on top.

    Unknown keys raise ``ValueError``; invalid values raise pydantic's
    ``ValidationError``.
    """
    global _ACTIVE
    unknown = set(overrides) - set(Settings.model_fields)
    if unknown:
        raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    merged = get_settings().model_dump()
    merged.update(overrides)
    _ACTIVE = Settings(**merged)

    from verdict.utils.logging import get

    get(_ACTIVE.log_level)
    return _ACTIVE


def load_settings_from_yaml(path: str | Path) -> Settings:
    """Load settings from a YAML mapping and make them active."""
    import yaml

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return configure(**data)


def reset_settings() -> None:
    """Forget the active settings; the next access re-reads the environment."""
    global _ACTIVE
    _ACTIVE = None
