"""Tests for the project packaging metadata."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


class TestPackageDiscovery:
    def test_namespace_subpackages_are_discovered(self):
        data = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
        find = data["tool"]["setuptools"]["packages"]["find"]
        # core/ and engines/ carry no __init__.py
        assert find["namespaces"] is True
        assert find["include"] == ["plutonium*"]

    def test_namespace_directories_exist(self):
        pkg = PYPROJECT.parent / "plutonium"
        assert (pkg / "__init__.py").is_file()
        assert not (pkg / "core" / "__init__.py").exists()
        assert (pkg / "core" / "logging.py").is_file()
        assert (pkg / "engines" / "dependency_checker" / "__init__.py").is_file()
