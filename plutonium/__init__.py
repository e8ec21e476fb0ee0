"""Plutonium: cross-ecosystem dependency consistency checker."""

__version__ = "0.1.0"

from plutonium.engines.dependency_checker import (
    AnalysisReport,
    CheckerConfig,
    CheckResult,
    DependencyChecker,
    check_dependencies,
    get_higher_version,
    parse_version,
)
from plutonium.exceptions import ManifestError, PlutoniumError, ReportWriteError

__all__ = [
    "AnalysisReport",
    "CheckResult",
    "CheckerConfig",
    "DependencyChecker",
    "ManifestError",
    "PlutoniumError",
    "ReportWriteError",
    "check_dependencies",
    "get_higher_version",
    "parse_version",
]
