"""Data models for version readings and check results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from constants import VersionSources


class VersionSource(Enum):
    """Enum for supported runtime-version declaration sources."""
    ENGINES = VersionSources.ENGINES.value
    VOLTA = VersionSources.VOLTA.value
    NVMRC = VersionSources.NVMRC.value
    NODE_VERSION = VersionSources.NODE_VERSION.value


class TypesLocation(Enum):
    """Manifest section that supplied the @types/node specifier."""
    DEV_DEPENDENCIES = "devDependencies"
    DEPENDENCIES = "dependencies"


class CheckStatus(Enum):
    """Tri-state outcome of a check."""
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


@dataclass(frozen=True)
class VersionReading:
    """One side of the comparison: the raw declared text and its major."""
    raw: Optional[str] = None
    major: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape of this reading."""
        return {"raw": self.raw, "major": self.major}


@dataclass(frozen=True)
class TypesNodeReading(VersionReading):
    """@types/node reading plus the manifest section it came from."""
    location: Optional[TypesLocation] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape of this reading."""
        data = super().to_dict()
        data["location"] = self.location.value if self.location else None
        return data


@dataclass(frozen=True)
class CheckResult:
    """Check outcome to feed rendering, JSON export and exit-code mapping."""
    status: CheckStatus
    source: VersionSource
    node_version: VersionReading
    types_node: TypesNodeReading
    message: str
    fix: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase field names of the JSON output."""
        return {
            "status": self.status.value,
            "source": self.source.value,
            "nodeVersion": self.node_version.to_dict(),
            "typesNode": self.types_node.to_dict(),
            "message": self.message,
            "fix": self.fix,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckResult":
        """Rebuild a result from the mapping produced by to_dict()."""
        node = data.get("nodeVersion") or {}
        types = data.get("typesNode") or {}
        location = types.get("location")
        return cls(
            status=CheckStatus(data["status"]),
            source=VersionSource(data["source"]),
            node_version=VersionReading(raw=node.get("raw"), major=node.get("major")),
            types_node=TypesNodeReading(
                raw=types.get("raw"),
                major=types.get("major"),
                location=TypesLocation(location) if location else None,
            ),
            message=data.get("message", ""),
            fix=data.get("fix"),
        )


# Shared empty readings used for absent sides.
NO_VERSION = VersionReading()
NO_TYPES = TypesNodeReading()
