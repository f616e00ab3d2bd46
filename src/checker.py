"""Reconcile the declared @types/node version with the declared Node.js version.

The check is a fixed, ordered rule table evaluated over the resolved readings;
the first rule that applies produces the result. Data problems (missing
manifest, absent fields, unparseable versions) are reported as WARN results,
never raised.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from versioning.models import (
    NO_TYPES,
    NO_VERSION,
    CheckResult,
    CheckStatus,
    TypesLocation,
    TypesNodeReading,
    VersionReading,
    VersionSource,
)
from versioning.normalize import get_major_from_specifier
from versioning.sources import load_manifest, read_node_version, source_label

logger = logging.getLogger(__name__)


def resolve_package_path(path: str) -> str:
    """Accept either a package.json path or the directory containing it."""
    if os.path.isdir(path):
        return os.path.join(path, Constants.PACKAGE_JSON_FILE)
    return path


def install_fix(major: int) -> str:
    """Install command pinning @types/node to a caret range on ``major``."""
    return Constants.INSTALL_FIX_TEMPLATE.format(major=major)


def read_types_node(manifest: Dict[str, Any]) -> TypesNodeReading:
    """Locate the @types/node specifier in a parsed manifest.

    devDependencies takes precedence over dependencies.
    """
    for location in (TypesLocation.DEV_DEPENDENCIES, TypesLocation.DEPENDENCIES):
        section = manifest.get(location.value)
        if not isinstance(section, dict):
            continue
        raw = section.get(Constants.TYPES_PACKAGE)
        if isinstance(raw, str) and raw:
            return TypesNodeReading(raw=raw, major=get_major_from_specifier(raw), location=location)
    return NO_TYPES


@dataclass(frozen=True)
class _Inputs:
    """Everything the rule table needs, resolved once per check."""
    package_path: str
    source: VersionSource
    label: str
    manifest_ok: bool
    node_version: VersionReading
    types_node: TypesNodeReading

    def result(self, status: CheckStatus, message: str, fix: Optional[str] = None) -> CheckResult:
        return CheckResult(
            status=status,
            source=self.source,
            node_version=self.node_version,
            types_node=self.types_node,
            message=message,
            fix=fix,
        )


def _unreadable_manifest(ctx: _Inputs) -> Optional[CheckResult]:
    if ctx.manifest_ok:
        return None
    return CheckResult(
        status=CheckStatus.WARN,
        source=ctx.source,
        node_version=NO_VERSION,
        types_node=NO_TYPES,
        message=f"Could not read or parse {ctx.package_path}",
    )


def _neither_found(ctx: _Inputs) -> Optional[CheckResult]:
    if ctx.node_version.raw is not None or ctx.types_node.raw is not None:
        return None
    return ctx.result(CheckStatus.WARN, f"Neither {ctx.label} nor {Constants.TYPES_PACKAGE} found.")


def _missing_node_version(ctx: _Inputs) -> Optional[CheckResult]:
    if ctx.node_version.raw is not None:
        return None
    fix = Constants.ENGINES_FIX_HINT if ctx.source is VersionSource.ENGINES else None
    return ctx.result(
        CheckStatus.WARN,
        f"No {ctx.label} found. Cannot verify {Constants.TYPES_PACKAGE} compatibility.",
        fix,
    )


def _missing_types_node(ctx: _Inputs) -> Optional[CheckResult]:
    if ctx.types_node.raw is not None:
        return None
    major = ctx.node_version.major
    return ctx.result(
        CheckStatus.WARN,
        f"{Constants.TYPES_PACKAGE} is not installed. Cannot verify compatibility.",
        install_fix(major) if major is not None else None,
    )


def _unparseable_node_version(ctx: _Inputs) -> Optional[CheckResult]:
    if ctx.node_version.major is not None:
        return None
    return ctx.result(
        CheckStatus.WARN,
        f'Could not parse version from {ctx.label}: "{ctx.node_version.raw}"',
    )


def _unparseable_types_node(ctx: _Inputs) -> Optional[CheckResult]:
    if ctx.types_node.major is not None:
        return None
    return ctx.result(
        CheckStatus.WARN,
        f'Could not parse major version from {Constants.TYPES_PACKAGE}: "{ctx.types_node.raw}"',
    )


def _majors_match(ctx: _Inputs) -> Optional[CheckResult]:
    node_major, types_major = ctx.node_version.major, ctx.types_node.major
    if node_major != types_major:
        return None
    return ctx.result(
        CheckStatus.PASS,
        f"{Constants.TYPES_PACKAGE} major ({types_major}) matches {ctx.label} major ({node_major}).",
    )


def _majors_differ(ctx: _Inputs) -> Optional[CheckResult]:
    node_major, types_major = ctx.node_version.major, ctx.types_node.major
    return ctx.result(
        CheckStatus.FAIL,
        f"{Constants.TYPES_PACKAGE} major ({types_major}) does not match {ctx.label} major ({node_major}).",
        install_fix(node_major),
    )


# Order matters: the first rule returning a result wins.
RULES: Tuple[Callable[[_Inputs], Optional[CheckResult]], ...] = (
    _unreadable_manifest,
    _neither_found,
    _missing_node_version,
    _missing_types_node,
    _unparseable_node_version,
    _unparseable_types_node,
    _majors_match,
    _majors_differ,
)


def check(package_path: str, source: VersionSource = VersionSource.ENGINES) -> CheckResult:
    """Check that @types/node matches the declared Node.js major version.

    Args:
        package_path: Path to package.json, or the directory containing it.
        source: Where to read the Node.js version from.

    Returns:
        CheckResult: PASS, FAIL or WARN with message and optional fix.
    """
    package_path = resolve_package_path(package_path)
    manifest = load_manifest(package_path)
    ctx = _Inputs(
        package_path=package_path,
        source=source,
        label=source_label(source),
        manifest_ok=manifest is not None,
        node_version=read_node_version(package_path, source, manifest) if manifest is not None else NO_VERSION,
        types_node=read_types_node(manifest) if manifest is not None else NO_TYPES,
    )

    for rule in RULES:
        result = rule(ctx)
        if result is not None:
            break
    else:  # pragma: no cover - _majors_differ always applies
        raise AssertionError("no check rule applied")

    if is_debug_enabled(logger):
        logger.debug(
            "Check complete",
            extra=extra_context(
                event="decision",
                component="checker",
                action="check",
                outcome=result.status.value,
                rule=rule.__name__,
                package_path=package_path,
            ),
        )
    return result
