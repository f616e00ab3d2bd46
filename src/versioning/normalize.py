"""Major-version extraction from npm ranges and dependency specifiers.

Both public helpers are total: malformed input yields None rather than an
exception, so callers can treat "unparseable" as ordinary data.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

import semantic_version
from semantic_version.base import AllOf, Always, AnyOf, Range

from constants import Constants

logger = logging.getLogger(__name__)

_COERCE_RE = re.compile(
    r'(?:^|[^\d])'
    r'(\d{1,%(n)d})(?:\.(\d{1,%(n)d}))?(?:\.(\d{1,%(n)d}))?'
    r'(?:$|[^\d])' % {"n": Constants.MAX_COERCE_DIGITS},
    re.ASCII,
)

_UNCONSTRAINED_SPECIFIERS = ("*", "latest")
_WILDCARD_RANGES = ("*", "x", "X")

_ZERO = semantic_version.Version(major=0, minor=0, patch=0)


def coerce_version(text: str) -> Optional[semantic_version.Version]:
    """Best-effort extraction of the first ``major[.minor[.patch]]`` token.

    Missing minor/patch parts default to 0; pre-release and build suffixes
    are dropped.

    Args:
        text: Arbitrary string that may contain a version number.

    Returns:
        The coerced Version, or None if no numeric token exists.
    """
    if not isinstance(text, str):
        return None
    m = _COERCE_RE.search(text)
    if not m:
        return None
    major, minor, patch = m.group(1), m.group(2), m.group(3)
    return semantic_version.Version(
        major=int(major),
        minor=int(minor or 0),
        patch=int(patch or 0),
    )


def _lower_bound(rng: Range) -> Optional[semantic_version.Version]:
    """Return the smallest version admitted by a single comparator."""
    target = rng.target
    if rng.operator in (Range.OP_GTE, Range.OP_EQ):
        return target
    if rng.operator == Range.OP_GT:
        if target.prerelease:
            return semantic_version.Version(
                major=target.major,
                minor=target.minor,
                patch=target.patch,
                prerelease=tuple(target.prerelease) + ('0',),
            )
        return target.next_patch()
    # <, <= and != place no lower bound
    return None


def _conjunction_minimum(clause, ranges: Iterable) -> Optional[semantic_version.Version]:
    """Highest lower bound within one space-separated comparator set."""
    candidate = _ZERO
    for sub in ranges:
        if isinstance(sub, Always):
            continue
        if not isinstance(sub, Range):
            return None
        bound = _lower_bound(sub)
        if bound is not None and bound > candidate:
            candidate = bound
    if not clause.match(candidate):
        return None
    return candidate


def _minimum_version(clause) -> Optional[semantic_version.Version]:
    """Lowest version satisfying a parsed NpmSpec clause tree.

    Disjunctions are searched globally, not just their first alternative.
    """
    if isinstance(clause, AnyOf):
        found = [v for v in (_minimum_version(c) for c in clause.clauses) if v is not None]
        return min(found) if found else None
    if isinstance(clause, AllOf):
        return _conjunction_minimum(clause, clause.clauses)
    if isinstance(clause, (Range, Always)):
        return _conjunction_minimum(clause, [clause])
    return None


def get_min_major_from_range(range_text: str) -> Optional[int]:
    """Extract the minimum major version from an engines.node style range.

    ">=20" -> 20, "^20.0.0" -> 20, ">=18 <22" -> 18, "20.x" -> 20,
    ">=18 || >=20" -> 18, "" -> 0.

    Args:
        range_text: npm range expression.

    Returns:
        Major of the lowest satisfying version, the coerced major when the
        range cannot be parsed, or None.
    """
    if not isinstance(range_text, str):
        return None
    text = range_text.strip()
    if not text or text in _WILDCARD_RANGES:
        return 0

    try:
        spec = semantic_version.NpmSpec(text)
    except ValueError:
        logger.debug("Not a strict npm range, coercing: %r", text)
    else:
        minimum = _minimum_version(spec.clause)
        if minimum is not None:
            return minimum.major

    coerced = coerce_version(text)
    return coerced.major if coerced else None


def get_major_from_specifier(specifier: str) -> Optional[int]:
    """Extract the major version from a dependency version specifier.

    "^22.1.0" -> 22, "~20.0.0" -> 20, "22.x" -> 22.
    Returns None for "*", "latest", or unparseable values.
    """
    if not isinstance(specifier, str):
        return None
    text = specifier.strip()
    if text in _UNCONSTRAINED_SPECIFIERS:
        return None
    coerced = coerce_version(text)
    return coerced.major if coerced else None
