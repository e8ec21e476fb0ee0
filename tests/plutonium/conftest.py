"""Shared fixtures for plutonium tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from plutonium.engines.dependency_checker import CheckerConfig


class RecordingReporter:
    """In-memory stand-in for the console reporter."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []
        self.headings: list[str] = []

    def log(self, message: str, level: str = "info") -> None:
        self.lines.append((level, message))

    def heading(self, title: str) -> None:
        self.headings.append(title)

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lvl, m in self.lines if level is None or lvl == level]


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any CLI logging setup so later tests do not write to a closed stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def deny_read():
    """Make ``Path.read_text`` raise PermissionError for files with the given name."""
    original = Path.read_text

    def _deny(filename: str):
        def _read_text(self, *args, **kwargs):
            if self.name == filename:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self, *args, **kwargs)

        return patch.object(Path, "read_text", _read_text)

    return _deny


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def write_package_json(path: Path, dependencies=None, dev_dependencies=None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict = {"name": path.parent.name, "version": "1.0.0"}
    if dependencies is not None:
        data["dependencies"] = dependencies
    if dev_dependencies is not None:
        data["devDependencies"] = dev_dependencies
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def make_package_json():
    return write_package_json


@pytest.fixture
def project(tmp_path) -> Path:
    """A project root with all three manifests in the default layout."""
    write_package_json(
        tmp_path / "package.json",
        dependencies={"lodash": "^4.17.20", "openai": "^4.0.0", "react": "^18.2.0"},
        dev_dependencies={"typescript": "~5.1.3", "eslint": "^8.0.0"},
    )
    write_package_json(
        tmp_path / "webview-ui" / "package.json",
        dependencies={"lodash": "^4.17.21", "react": "^18.2.0"},
        dev_dependencies={"typescript": "~5.2.x"},
    )
    req = tmp_path / "python_backend" / "requirements.txt"
    req.parent.mkdir()
    req.write_text(
        "# backend deps\n"
        "requests==2.28.1  # pinned\n"
        "openai>=1.3.0\n"
        "flask\n"
        "\n"
        "tiktoken~=0.5\n"
    )
    return tmp_path


@pytest.fixture
def config(project) -> CheckerConfig:
    return CheckerConfig.from_root(project)
