"""Version models, normalization and runtime-version sources."""

from .models import (
    CheckResult,
    CheckStatus,
    TypesLocation,
    TypesNodeReading,
    VersionReading,
    VersionSource,
)
from .normalize import coerce_version, get_major_from_specifier, get_min_major_from_range
from .sources import read_node_version, source_label

__all__ = [
    "CheckResult",
    "CheckStatus",
    "TypesLocation",
    "TypesNodeReading",
    "VersionReading",
    "VersionSource",
    "coerce_version",
    "get_major_from_specifier",
    "get_min_major_from_range",
    "read_node_version",
    "source_label",
]
