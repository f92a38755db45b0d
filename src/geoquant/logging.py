"""
Logging for geoquant.

The package logs through the global Loguru ``logger`` and keeps its own
namespace disabled until an application opts in with :func:`setup_logging`.

Exports:
    - logger: Global Loguru logger.
    - setup_logging: Enable geoquant messages on a sink.
"""

from __future__ import annotations

import sys
from typing import Any, Optional

from loguru import logger

from geoquant.config import get_settings

__all__ = [
    "logger",
    "setup_logging",
]

_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def setup_logging(level: Optional[str] = None, sink: Any = None, **kwargs: Any) -> int:
    """
    Enable geoquant log records and route them to ``sink``.

    Args:
        level (str, optional): Minimum level. Defaults to ``GEOQUANT_LOG_LEVEL``.
        sink: Any Loguru sink (defaults to ``sys.stderr``).
        **kwargs: Passed to ``logger.add()``.
    Returns:
        int: The handler id, usable with ``logger.remove()``.
    """
    level = (level or get_settings().log_level).upper()
    logger.enable("geoquant")
    handler_id = logger.add(
        sys.stderr if sink is None else sink,
        level=level,
        format=kwargs.pop("format", _FORMAT),
        filter="geoquant",
        **kwargs,
    )
    logger.debug("geoquant logging initialized at level {}", level)
    return handler_id
