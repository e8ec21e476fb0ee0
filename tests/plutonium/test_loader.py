"""Tests for the package.json loader."""

from __future__ import annotations

import pytest

from plutonium.engines.dependency_checker.loader import (
    load_manifest,
    merge_dependencies,
    package_entries,
)
from plutonium.engines.dependency_checker.models import DependencyType
from plutonium.exceptions import ManifestError


class TestLoadManifest:
    def test_missing_returns_none(self, tmp_path):
        assert load_manifest(tmp_path / "package.json") is None

    def test_loads_sections(self, tmp_path, make_package_json):
        path = make_package_json(
            tmp_path / "package.json",
            dependencies={"react": "^18.2.0"},
            dev_dependencies={"vitest": "^1.0.0"},
        )
        manifest = load_manifest(path)
        assert manifest.dependencies == {"react": "^18.2.0"}
        assert manifest.dev_dependencies == {"vitest": "^1.0.0"}

    def test_no_sections(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "x", "scripts": {"build": "tsc"}}')
        manifest = load_manifest(path)
        assert manifest.dependencies == {}
        assert manifest.dev_dependencies == {}

    def test_null_section_is_empty(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"dependencies": null}')
        assert load_manifest(path).dependencies == {}

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"dependencies": {"react": "^18"')
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)
        assert exc_info.value.path == path
        assert "invalid JSON" in str(exc_info.value)

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('["react"]')
        with pytest.raises(ManifestError):
            load_manifest(path)

    def test_unreadable_file_raises(self, tmp_path, make_package_json, deny_read):
        path = make_package_json(tmp_path / "package.json", dependencies={"react": "^18"})
        with deny_read("package.json"), pytest.raises(ManifestError) as exc_info:
            load_manifest(path)
        assert exc_info.value.reason == "Permission denied"
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_snake_case_section_is_ignored(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"dev_dependencies": {"left-pad": "1.0.0"}}')
        manifest = load_manifest(path)
        assert manifest.dev_dependencies == {}
        assert manifest.dependencies == {}

    def test_non_string_version_raises(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"dependencies": {"react": 18}}')
        with pytest.raises(ManifestError):
            load_manifest(path)


class TestMergeDependencies:
    def test_none(self):
        assert merge_dependencies(None) == {}

    def test_dev_overrides_value_but_keeps_position(self, tmp_path, make_package_json):
        path = make_package_json(
            tmp_path / "package.json",
            dependencies={"a": "1.0.0", "b": "1.0.0"},
            dev_dependencies={"c": "1.0.0", "a": "2.0.0"},
        )
        merged = merge_dependencies(load_manifest(path))
        assert list(merged) == ["a", "b", "c"]
        assert merged["a"] == "2.0.0"


class TestPackageEntries:
    def test_types(self, tmp_path, make_package_json):
        path = make_package_json(
            tmp_path / "package.json",
            dependencies={"react": "^18.2.0", "shared": "1.0.0"},
            dev_dependencies={"vitest": "^1.0.0", "shared": "2.0.0"},
        )
        entries = package_entries(load_manifest(path), "package.json")
        by_name = {e.name: e for e in entries}
        assert by_name["react"].type is DependencyType.DEPENDENCY
        assert by_name["vitest"].type is DependencyType.DEV_DEPENDENCY
        assert by_name["shared"].type is DependencyType.DEPENDENCY
        assert by_name["shared"].version == "2.0.0"
        assert all(e.source_file == "package.json" for e in entries)

    def test_none_manifest(self):
        assert package_entries(None, "package.json") == []
