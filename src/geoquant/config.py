"""
geoquant.config
===============

Runtime settings, read from the environment.

Variables
---------
GEOQUANT_LOG_LEVEL
    Level used by :func:`geoquant.logging.setup_logging` when no explicit
    level is given (default ``WARNING``).
GEOQUANT_REL_TOL
    Relative tolerance for fuzzy quantity comparison (default ``1e-12``).
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from geoquant.exceptions import ConfigurationError

_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REL_TOL = 1e-12
_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = _DEFAULT_LOG_LEVEL
    rel_tol: float = _DEFAULT_REL_TOL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        level = env.get("GEOQUANT_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(variable="GEOQUANT_LOG_LEVEL", value=level)

        raw_tol = env.get("GEOQUANT_REL_TOL")
        if raw_tol is None:
            rel_tol = _DEFAULT_REL_TOL
        else:
            try:
                rel_tol = float(raw_tol)
            except ValueError as e:
                raise ConfigurationError(variable="GEOQUANT_REL_TOL", value=raw_tol) from e
            if not (rel_tol >= 0 and math.isfinite(rel_tol)):
                raise ConfigurationError(variable="GEOQUANT_REL_TOL", value=raw_tol)

        return cls(log_level=level, rel_tol=rel_tol)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process settings, read once from the environment."""
    return Settings.from_env()


def reload_settings() -> Settings:
    """Drop the cached settings and read the environment again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["Settings", "get_settings", "reload_settings"]
