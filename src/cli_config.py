"""Configuration file support for the CLI.

Loads an optional YAML (or JSON) config file and fills in any option the
user left unset on the command line. CLI flags always take precedence.
Config problems are logged and never abort the CLI.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants, default_config_paths

logger = logging.getLogger(__name__)

# config key -> (args attribute, expected type)
_OPTION_MAP = {
    "package": ("PACKAGE", str),
    "source": ("SOURCE", str),
    "json": ("JSON", bool),
    "verbose": ("VERBOSE", bool),
    "quiet": ("QUIET", bool),
    "color": ("COLOR", bool),
}


def _find_config(explicit: Optional[str]) -> Optional[str]:
    if isinstance(explicit, str) and explicit.strip():
        return explicit
    for candidate in default_config_paths():
        if os.path.isfile(candidate):
            return candidate
    return None


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the config mapping from ``path`` or the default locations.

    Args:
        path: Explicit config file path (YAML, YML, or JSON).

    Returns:
        dict: Parsed top-level mapping, or {} when absent or invalid.
    """
    config_path = _find_config(path)
    if config_path is None:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            if config_path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", config_path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must contain a mapping; ignoring it", config_path)
        return {}
    logger.debug("Loaded config from %s", config_path)
    return data


def apply_config(args, config: Dict[str, Any]) -> None:
    """Fill unset CLI options from config values, then apply built-in defaults.

    Unknown keys and values of the wrong type are logged and skipped.
    """
    for key, value in config.items():
        if key not in _OPTION_MAP:
            logger.warning("Unknown config key ignored: %s", key)
            continue
        attr, expected = _OPTION_MAP[key]
        if not isinstance(value, expected):
            logger.warning("Config key %s must be a %s; ignoring %r", key, expected.__name__, value)
            continue
        if key == "source" and value not in Constants.SUPPORTED_SOURCES:
            logger.warning(
                "Config source %r is not one of %s; ignoring it",
                value, ", ".join(Constants.SUPPORTED_SOURCES),
            )
            continue
        if getattr(args, attr, None) is None:
            setattr(args, attr, value)

    if args.PACKAGE is None:
        args.PACKAGE = Constants.PACKAGE_JSON_FILE
    if args.SOURCE is None:
        args.SOURCE = Constants.DEFAULT_SOURCE
    for attr in ("JSON", "PRINT", "QUIET", "VERBOSE"):
        if getattr(args, attr, None) is None:
            setattr(args, attr, False)
    if args.COLOR is None:
        args.COLOR = True
