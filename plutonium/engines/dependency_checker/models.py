"""Data models for the dependency checker engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any


class DependencyType(str, Enum):
    """Which section of an npm manifest a package was declared in."""

    DEPENDENCY = "dependency"
    DEV_DEPENDENCY = "devDependency"


@dataclass(frozen=True)
class PackageEntry:
    """A single declaration parsed from a manifest or requirements file.

    ``version`` keeps the raw declared range (``^1.2.0``, ``==2.28.1``) and is
    ``None`` for unpinned requirements. ``type`` is only set for npm entries.
    """

    name: str
    version: str | None
    source_file: str
    type: DependencyType | None = None

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "file": self.source_file,
        }
        if self.type is not None:
            row["type"] = self.type.value
        return row


@dataclass(frozen=True)
class VersionInconsistency:
    """A package declared in both npm manifests with different version strings."""

    name: str
    main_version: str
    webview_version: str
    recommended: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "mainVersion": self.main_version,
            "webviewVersion": self.webview_version,
            "recommended": self.recommended,
        }


@dataclass(frozen=True)
class CrossLanguageIssue:
    """The same logical package declared in both the Python and npm ecosystems."""

    name: str
    python_version: str
    js_version: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "pythonVersion": self.python_version,
            "jsVersion": self.js_version,
        }


@dataclass
class RequirementsResult:
    """Parsed requirements file: every entry plus the names of unpinned ones.

    ``error`` is set when the file existed but could not be read.
    """

    packages: list[PackageEntry] = field(default_factory=list)
    unpinned: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class ReportSummary:
    npm_inconsistencies: int
    cross_language_issues: int
    unpinned_python_deps: int

    @property
    def total(self) -> int:
        return self.npm_inconsistencies + self.cross_language_issues + self.unpinned_python_deps

    def to_dict(self) -> dict[str, int]:
        return {
            "npmInconsistencies": self.npm_inconsistencies,
            "crossLanguageIssues": self.cross_language_issues,
            "unpinnedPythonDeps": self.unpinned_python_deps,
        }


@dataclass
class AnalysisReport:
    """Everything one checker run found; rendered into the HTML report."""

    python_packages: list[PackageEntry] = field(default_factory=list)
    main_packages: list[PackageEntry] = field(default_factory=list)
    webview_packages: list[PackageEntry] = field(default_factory=list)
    shared_packages: list[str] = field(default_factory=list)
    npm_inconsistencies: list[VersionInconsistency] = field(default_factory=list)
    cross_language_issues: list[CrossLanguageIssue] = field(default_factory=list)
    unpinned_python_deps: list[str] = field(default_factory=list)
    generated_at: datetime | None = None

    @property
    def summary(self) -> ReportSummary:
        return ReportSummary(
            npm_inconsistencies=len(self.npm_inconsistencies),
            cross_language_issues=len(self.cross_language_issues),
            unpinned_python_deps=len(self.unpinned_python_deps),
        )

    def to_dict(self) -> dict[str, Any]:
        """Report data without the timestamp, stable across identical runs."""
        return {
            "pythonPackages": [p.to_dict() for p in self.python_packages],
            "mainPackages": [p.to_dict() for p in self.main_packages],
            "webviewPackages": [p.to_dict() for p in self.webview_packages],
            "sharedPackages": [{"name": name} for name in self.shared_packages],
            "npmInconsistencies": [i.to_dict() for i in self.npm_inconsistencies],
            "crossLanguageIssues": [i.to_dict() for i in self.cross_language_issues],
            "unpinnedPythonDeps": list(self.unpinned_python_deps),
        }


@dataclass(frozen=True)
class CheckResult:
    """Returned by a checker run: where the report went and what it counted."""

    report_path: Path
    summary: ReportSummary
    report: AnalysisReport
