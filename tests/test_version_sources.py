"""Tests for reading the declared Node.js version from each source."""

import json

import pytest

from versioning.models import VersionReading, VersionSource
from versioning.sources import load_manifest, read_node_version, source_label


def _write_manifest(tmp_path, data):
    path = tmp_path / "package.json"
    path.write_text(json.dumps(data, indent=2))
    return str(path)


class TestSourceLabel:
    """Each source has a fixed display label."""

    @pytest.mark.parametrize(
        "source,label",
        [
            (VersionSource.ENGINES, "engines.node"),
            (VersionSource.VOLTA, "volta.node"),
            (VersionSource.NVMRC, ".nvmrc"),
            (VersionSource.NODE_VERSION, ".node-version"),
        ],
    )
    def test_labels(self, source, label):
        assert source_label(source) == label


class TestManifestSources:
    """engines.node and volta.node are read from package.json."""

    def test_engines_uses_range_minimum(self, tmp_path):
        path = _write_manifest(tmp_path, {"engines": {"node": ">=18 <22"}})
        assert read_node_version(path, VersionSource.ENGINES) == VersionReading(">=18 <22", 18)

    def test_volta_uses_exact_version(self, tmp_path):
        path = _write_manifest(tmp_path, {"volta": {"node": "20.11.1"}})
        assert read_node_version(path, VersionSource.VOLTA) == VersionReading("20.11.1", 20)

    def test_uses_given_manifest(self, tmp_path):
        """A parsed manifest is used as-is; the file is not consulted."""
        path = _write_manifest(tmp_path, {"engines": {"node": ">=16"}})
        manifest = {"engines": {"node": ">=18"}}
        assert read_node_version(path, VersionSource.ENGINES, manifest) == VersionReading(">=18", 18)

    def test_missing_field(self, tmp_path):
        path = _write_manifest(tmp_path, {"name": "demo"})
        assert read_node_version(path, VersionSource.ENGINES) == VersionReading(None, None)
        assert read_node_version(path, VersionSource.VOLTA) == VersionReading(None, None)

    def test_non_string_field_is_absent(self, tmp_path):
        path = _write_manifest(tmp_path, {"engines": {"node": 20}})
        assert read_node_version(path, VersionSource.ENGINES).raw is None

    def test_unparseable_value_keeps_raw(self, tmp_path):
        path = _write_manifest(tmp_path, {"engines": {"node": "lts/iron"}})
        assert read_node_version(path, VersionSource.ENGINES) == VersionReading("lts/iron", None)

    def test_malformed_manifest(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{ not json")
        assert read_node_version(str(path), VersionSource.ENGINES) == VersionReading(None, None)

    def test_missing_manifest(self, tmp_path):
        path = str(tmp_path / "package.json")
        assert read_node_version(path, VersionSource.VOLTA) == VersionReading(None, None)


class TestSiblingFileSources:
    """.nvmrc and .node-version are read next to package.json."""

    @pytest.mark.parametrize(
        "source,file_name",
        [(VersionSource.NVMRC, ".nvmrc"), (VersionSource.NODE_VERSION, ".node-version")],
    )
    def test_strips_v_prefix_and_whitespace(self, tmp_path, source, file_name):
        path = _write_manifest(tmp_path, {})
        (tmp_path / file_name).write_text("v20.11.0\n")
        assert read_node_version(path, source) == VersionReading("v20.11.0", 20)

    def test_plain_major(self, tmp_path):
        path = _write_manifest(tmp_path, {})
        (tmp_path / ".nvmrc").write_text("22")
        assert read_node_version(path, VersionSource.NVMRC) == VersionReading("22", 22)

    def test_missing_file(self, tmp_path):
        path = _write_manifest(tmp_path, {})
        assert read_node_version(path, VersionSource.NVMRC) == VersionReading(None, None)

    def test_empty_file(self, tmp_path):
        path = _write_manifest(tmp_path, {})
        (tmp_path / ".node-version").write_text("  \n")
        assert read_node_version(path, VersionSource.NODE_VERSION) == VersionReading(None, None)

    def test_unparseable_file(self, tmp_path):
        path = _write_manifest(tmp_path, {})
        (tmp_path / ".nvmrc").write_text("lts/*\n")
        assert read_node_version(path, VersionSource.NVMRC) == VersionReading("lts/*", None)

    def test_does_not_need_readable_manifest(self, tmp_path):
        """The sibling file is located from the manifest path alone."""
        (tmp_path / ".nvmrc").write_text("18")
        path = str(tmp_path / "package.json")
        assert read_node_version(path, VersionSource.NVMRC) == VersionReading("18", 18)


class TestLoadManifest:
    """load_manifest only accepts JSON objects."""

    def test_valid(self, tmp_path):
        path = _write_manifest(tmp_path, {"name": "demo"})
        assert load_manifest(path) == {"name": "demo"}

    def test_array_is_rejected(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("[]")
        assert load_manifest(str(path)) is None

    def test_missing(self, tmp_path):
        assert load_manifest(str(tmp_path / "nope.json")) is None
