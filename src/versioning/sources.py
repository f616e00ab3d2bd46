"""Readers for the places a project can declare its Node.js runtime version.

Every reader returns a VersionReading and never raises for missing files,
malformed JSON or absent fields.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Dict, Optional

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning.models import NO_VERSION, VersionReading, VersionSource
from versioning.normalize import get_major_from_specifier, get_min_major_from_range

logger = logging.getLogger(__name__)


def source_label(source: VersionSource) -> str:
    """Human readable label for a source, i.e. "engines.node" or ".nvmrc"."""
    return Constants.SOURCE_LABELS[source.value]


def read_text_file(path: str) -> Optional[str]:
    """Read a whole UTF-8 text file, returning None when absent or unreadable."""
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, ValueError) as e:
        # ValueError: undecodable bytes or a null byte in the path
        logger.debug("Could not read %s: %s", path, e)
        return None


def load_manifest(package_path: str) -> Optional[Dict[str, Any]]:
    """Load and parse package.json.

    Returns:
        dict: Parsed manifest, or None if unreadable, invalid JSON, or not an object.
    """
    text = read_text_file(package_path)
    if text is None:
        return None
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("Invalid JSON in %s: %s", package_path, e)
        return None
    if not isinstance(data, dict):
        logger.debug("Manifest %s is not a JSON object", package_path)
        return None
    return data


def _nested_string(manifest: Optional[Dict[str, Any]], section: str, key: str) -> Optional[str]:
    if not manifest:
        return None
    block = manifest.get(section)
    if not isinstance(block, dict):
        return None
    value = block.get(key)
    if not isinstance(value, str) or not value:
        return None
    return value


def _read_engines(package_path: str, manifest: Optional[Dict[str, Any]]) -> VersionReading:
    # engines.node is a range; its minimum bound is what matters
    raw = _nested_string(manifest, "engines", "node")
    if raw is None:
        return NO_VERSION
    return VersionReading(raw=raw, major=get_min_major_from_range(raw))


def _read_volta(package_path: str, manifest: Optional[Dict[str, Any]]) -> VersionReading:
    # volta pins an exact version
    raw = _nested_string(manifest, "volta", "node")
    if raw is None:
        return NO_VERSION
    return VersionReading(raw=raw, major=get_major_from_specifier(raw))


def _read_sibling_file(package_path: str, file_name: str) -> VersionReading:
    path = os.path.join(os.path.dirname(os.path.abspath(package_path)), file_name)
    text = read_text_file(path)
    if text is None:
        return NO_VERSION
    raw = text.strip()
    if not raw:
        return NO_VERSION
    stripped = raw[1:] if raw.startswith("v") else raw
    return VersionReading(raw=raw, major=get_major_from_specifier(stripped))


_MANIFEST_SOURCES = (VersionSource.ENGINES, VersionSource.VOLTA)

_READERS: Dict[VersionSource, Callable[[str, Optional[Dict[str, Any]]], VersionReading]] = {
    VersionSource.ENGINES: _read_engines,
    VersionSource.VOLTA: _read_volta,
    VersionSource.NVMRC: lambda p, _m: _read_sibling_file(p, Constants.NVMRC_FILE),
    VersionSource.NODE_VERSION: lambda p, _m: _read_sibling_file(p, Constants.NODE_VERSION_FILE),
}


def read_node_version(package_path: str, source: VersionSource,
                      manifest: Optional[Dict[str, Any]] = None) -> VersionReading:
    """Read the declared Node.js version from the chosen source.

    Args:
        package_path: Path to package.json; sibling files are looked up in its directory.
        source: Which declaration to read.
        manifest: Already parsed package.json; loaded from package_path when
            omitted and the source lives in the manifest.

    Returns:
        VersionReading: raw text and parsed major, both None when not found.
    """
    if manifest is None and source in _MANIFEST_SOURCES:
        manifest = load_manifest(package_path)
    reading = _READERS[source](package_path, manifest)
    if is_debug_enabled(logger):
        logger.debug(
            "Node version read",
            extra=extra_context(
                event="decision",
                component="sources",
                action="read_node_version",
                outcome="found" if reading.raw is not None else "missing",
                source=source.value,
                raw=reading.raw,
                major=reading.major,
            ),
        )
    return reading
