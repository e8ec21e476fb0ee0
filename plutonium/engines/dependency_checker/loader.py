"""Loader for npm package.json manifests."""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from plutonium.engines.dependency_checker.models import DependencyType, PackageEntry
from plutonium.exceptions import ManifestError

log = structlog.get_logger("plutonium.engine.loader")


class NpmManifest(BaseModel):
    """The parts of a package.json the checker reads; other keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")


def load_manifest(file_path: Path) -> NpmManifest | None:
    """Load a package.json.

    Returns ``None`` when the file does not exist.  Raises
    :class:`ManifestError` when it exists but is not valid JSON or does not
    have the expected shape.
    """
    if not file_path.is_file():
        log.debug("loader.manifest_missing", path=str(file_path))
        return None

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ManifestError(file_path, "not UTF-8 text") from e
    except OSError as e:
        raise ManifestError(file_path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise ManifestError(file_path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ManifestError(file_path, "top-level value is not an object")

    # JSON null sections behave like absent ones
    data = {k: v for k, v in data.items() if v is not None}
    try:
        manifest = NpmManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(
            file_path,
            "dependency sections must map names to version strings "
            f"({e.error_count()} errors)",
        ) from e

    log.debug(
        "loader.manifest_loaded",
        path=str(file_path),
        dependencies=len(manifest.dependencies),
        dev_dependencies=len(manifest.dev_dependencies),
    )
    return manifest


def merge_dependencies(manifest: NpmManifest | None) -> dict[str, str]:
    """Merge ``dependencies`` and ``devDependencies`` into one name→range mapping.

    A name listed in both keeps its first position and the dev range.
    """
    if manifest is None:
        return {}
    merged = dict(manifest.dependencies)
    merged.update(manifest.dev_dependencies)
    return merged


def package_entries(manifest: NpmManifest | None, source_file: str) -> list[PackageEntry]:
    entries: list[PackageEntry] = []
    if manifest is None:
        return entries
    for name, version in merge_dependencies(manifest).items():
        dep_type = (
            DependencyType.DEPENDENCY
            if name in manifest.dependencies
            else DependencyType.DEV_DEPENDENCY
        )
        entries.append(
            PackageEntry(name=name, version=version, source_file=source_file, type=dep_type)
        )
    return entries
