"""Centralized logging setup and structured debug helpers.

The CLI prints its report on stdout; log records always go to stderr (or a
log file) so JSON output stays machine-readable.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_NAME = "check_node_types"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.LOG_LEVEL_ENV) or Constants.DEFAULT_LOG_LEVEL)
    value = getattr(logging, str(name).strip().upper(), None)
    if not isinstance(value, int):
        return getattr(logging, Constants.DEFAULT_LOG_LEVEL)
    return value


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Install the project handler on the root logger.

    Level precedence: explicit argument, then CHECK_NODE_TYPES_LOG_LEVEL,
    then WARNING. Calling this again replaces the previous handler.

    Args:
        level: Logging level name, i.e. "DEBUG".
        log_file: Optional file to log to instead of stderr.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from this logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record.

    Keys with None values are dropped.
    """
    return {key: value for key, value in fields.items() if value is not None}
