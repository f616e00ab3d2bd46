"""Tests for major-version extraction from npm ranges and specifiers."""

import pytest

from versioning.normalize import (
    coerce_version,
    get_major_from_specifier,
    get_min_major_from_range,
)


class TestMinMajorFromRange:
    """get_min_major_from_range returns the major of the lowest satisfying version."""

    @pytest.mark.parametrize(
        "range_text,expected",
        [
            (">=20", 20),
            ("^20.0.0", 20),
            ("~20.11.0", 20),
            ("20.x", 20),
            (">=18 <22", 18),
            (">=18.0.0 || >=20.0.0", 18),
            ("20", 20),
            (">=18.17.0", 18),
            ("*", 0),
            (">=0", 0),
            ("<20", 0),
            ("18 - 20", 18),
        ],
    )
    def test_ranges(self, range_text, expected):
        assert get_min_major_from_range(range_text) == expected

    @pytest.mark.parametrize("major", [0, 1, 16, 20, 22, 100])
    def test_simple_forms_for_any_major(self, major):
        assert get_min_major_from_range(f">={major}") == major
        assert get_min_major_from_range(f"^{major}.0.0") == major
        assert get_min_major_from_range(f"{major}.x") == major

    def test_disjunction_uses_global_minimum(self):
        """The lowest clause wins even when it is not the first one."""
        assert get_min_major_from_range(">=22 || >=18") == 18

    def test_unparseable_returns_none(self):
        assert get_min_major_from_range("not-a-version") is None

    def test_empty_is_unconstrained(self):
        assert get_min_major_from_range("") == 0

    def test_whitespace_only_is_unconstrained(self):
        assert get_min_major_from_range("   ") == 0

    def test_whitespace_padded(self):
        assert get_min_major_from_range(" >=20 ") == 20

    def test_prerelease(self):
        assert get_min_major_from_range(">=20.0.0-rc.1") == 20

    def test_falls_back_to_coercion(self):
        """Non-npm syntax still yields the first numeric token's major."""
        assert get_min_major_from_range("node 20.11") == 20

    def test_non_string_returns_none(self):
        assert get_min_major_from_range(None) is None


class TestMajorFromSpecifier:
    """get_major_from_specifier coerces a dependency specifier to its major."""

    @pytest.mark.parametrize(
        "specifier,expected",
        [
            ("^22.1.0", 22),
            ("~20.0.0", 20),
            ("22.x", 22),
            ("22", 22),
            ("22.0.0", 22),
            ("^20.11.5", 20),
            (">=18.0.0", 18),
            ("20.0.0-beta.3", 20),
        ],
    )
    def test_specifiers(self, specifier, expected):
        assert get_major_from_specifier(specifier) == expected

    def test_star_is_unconstrained(self):
        assert get_major_from_specifier("*") is None

    def test_latest_is_unconstrained(self):
        assert get_major_from_specifier("latest") is None

    def test_no_digits(self):
        assert get_major_from_specifier("next") is None

    def test_major_only_is_idempotent(self):
        assert get_major_from_specifier("20") == 20
        assert get_min_major_from_range("20") == 20


class TestCoerceVersion:
    """coerce_version finds the first numeric version token."""

    def test_fills_missing_parts(self):
        v = coerce_version("v18")
        assert (v.major, v.minor, v.patch) == (18, 0, 0)

    def test_drops_prerelease(self):
        v = coerce_version("20.1.2-rc.1+build.5")
        assert (v.major, v.minor, v.patch) == (20, 1, 2)
        assert not v.prerelease

    def test_first_token_wins(self):
        assert coerce_version("lts 18 or 20").major == 18

    def test_none_without_digits(self):
        assert coerce_version("lts/iron") is None

    def test_non_ascii_digits_are_ignored(self):
        assert coerce_version("\u0661\u0662") is None
        assert get_major_from_specifier("^\u0661\u0662") is None

    def test_too_many_digits_is_skipped(self):
        assert coerce_version("12345678901234567") is None
