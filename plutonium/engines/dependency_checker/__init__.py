"""Dependency checker engine — compare npm and Python manifests and report drift."""

from plutonium.engines.dependency_checker.checker import (
    CheckerConfig,
    DependencyChecker,
    Reporter,
    check_dependencies,
)
from plutonium.engines.dependency_checker.models import (
    AnalysisReport,
    CheckResult,
    CrossLanguageIssue,
    PackageEntry,
    VersionInconsistency,
)
from plutonium.engines.dependency_checker.versions import get_higher_version, parse_version

__all__ = [
    "AnalysisReport",
    "CheckResult",
    "CheckerConfig",
    "CrossLanguageIssue",
    "DependencyChecker",
    "PackageEntry",
    "Reporter",
    "VersionInconsistency",
    "check_dependencies",
    "get_higher_version",
    "parse_version",
]
