"""DependencyChecker — load manifests, compare them, write the HTML report."""

from __future__ import annotations

import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from plutonium.engines.dependency_checker.collisions import find_cross_language_issues
from plutonium.engines.dependency_checker.loader import (
    load_manifest,
    merge_dependencies,
    package_entries,
)
from plutonium.engines.dependency_checker.models import (
    AnalysisReport,
    CheckResult,
    VersionInconsistency,
)
from plutonium.engines.dependency_checker.report import REPORT_FILENAME, write_html_report
from plutonium.engines.dependency_checker.requirements import parse_python_requirements
from plutonium.engines.dependency_checker.versions import get_higher_version

log = structlog.get_logger("plutonium.engine")


@runtime_checkable
class Reporter(Protocol):
    """Human-facing progress output supplied by the caller."""

    def log(self, message: str, level: str = "info") -> None: ...

    def heading(self, title: str) -> None: ...


@dataclass(frozen=True)
class CheckerConfig:
    """Input manifests and output directory for one run."""

    main_package_json: Path
    webview_package_json: Path
    python_requirements: Path
    reports_dir: Path

    @classmethod
    def from_root(cls, root: Path) -> CheckerConfig:
        """Default project layout relative to ``root``."""
        return cls(
            main_package_json=root / "package.json",
            webview_package_json=root / "webview-ui" / "package.json",
            python_requirements=root / "python_backend" / "requirements.txt",
            reports_dir=root / "reports",
        )

    @property
    def report_path(self) -> Path:
        return self.reports_dir / REPORT_FILENAME


class DependencyChecker:
    """Runs the full analysis once per :meth:`run` call; holds no state between runs."""

    def __init__(
        self,
        config: CheckerConfig,
        reporter: Reporter,
        mapping: Mapping[str, str] | None = None,
    ) -> None:
        self._config = config
        self._reporter = reporter
        self._mapping = mapping

    def analyze(self, generated_at: datetime | None = None) -> AnalysisReport:
        """Build the report without writing anything.

        ``generated_at`` stamps the report; it defaults to the current UTC time.

        Raises :class:`~plutonium.exceptions.ManifestError` on a malformed
        npm manifest.
        """
        out = self._reporter
        cfg = self._config
        report = AnalysisReport(generated_at=generated_at or datetime.now(timezone.utc))

        main_pkg = load_manifest(cfg.main_package_json)
        if main_pkg is None:
            out.log("No package.json found in the project root.", "warning")
        webview_pkg = load_manifest(cfg.webview_package_json)
        if webview_pkg is None:
            out.log(
                "Webview package.json not found, skipping webview dependency analysis.",
                "warning",
            )

        main_deps = merge_dependencies(main_pkg)
        webview_deps = merge_dependencies(webview_pkg)
        report.main_packages = package_entries(main_pkg, cfg.main_package_json.name)
        report.webview_packages = package_entries(webview_pkg, cfg.webview_package_json.name)

        # ── npm consistency ──────────────────────────────────────────────
        report.shared_packages = [name for name in main_deps if name in webview_deps]
        for name in report.shared_packages:
            main_version = main_deps[name]
            webview_version = webview_deps[name]
            if main_version == webview_version:
                continue
            report.npm_inconsistencies.append(
                VersionInconsistency(
                    name=name,
                    main_version=main_version,
                    webview_version=webview_version,
                    recommended=get_higher_version(main_version, webview_version),
                )
            )

        # ── Python requirements ──────────────────────────────────────────
        if cfg.python_requirements.is_file():
            req = parse_python_requirements(cfg.python_requirements)
            report.python_packages = req.packages
            report.unpinned_python_deps = req.unpinned
            if req.error:
                out.log(
                    f"Error parsing {cfg.python_requirements}: {req.error}",
                    "warning",
                )
            else:
                out.log(
                    f"Found {len(req.packages)} Python packages in {cfg.python_requirements.name}"
                )
        else:
            out.log("No Python requirements.txt found.", "warning")

        # ── Cross-language ───────────────────────────────────────────────
        report.cross_language_issues = find_cross_language_issues(
            report.python_packages, main_deps, self._mapping
        )

        log.info(
            "checker.analyzed",
            python_packages=len(report.python_packages),
            main_packages=len(report.main_packages),
            webview_packages=len(report.webview_packages),
            shared=len(report.shared_packages),
            **report.summary.to_dict(),
        )
        return report

    def run(self) -> CheckResult:
        """Analyze, print progress through the reporter and write the HTML report."""
        out = self._reporter
        started_at = datetime.now(timezone.utc)
        out.heading("Analyzing dependencies")
        out.log("🔍 Dependency Analyzer (Plutonium)")
        out.log(
            f"Running on Python {platform.python_version()} | {sys.platform}-{platform.machine()}"
            f" | {started_at.isoformat()}"
        )

        report = self.analyze(generated_at=started_at)
        self._log_findings(report)

        report_path = write_html_report(report, self._config.reports_dir)
        out.log(f"\nReport generated: {report_path}")

        summary = report.summary
        out.heading("Analysis Summary")
        out.log(f"{summary.npm_inconsistencies} npm version inconsistencies")
        out.log(f"{summary.cross_language_issues} potential cross-language issues")
        out.log(f"{summary.unpinned_python_deps} unpinned Python dependencies")

        return CheckResult(report_path=report_path, summary=summary, report=report)

    def _log_findings(self, report: AnalysisReport) -> None:
        out = self._reporter

        out.log("\nAnalyzing dependencies...")
        out.log(f"Found {len(report.python_packages)} Python packages")
        out.log(f"Found {len(report.main_packages)} main npm packages")
        out.log(f"Found {len(report.webview_packages)} webview npm packages")

        out.heading("Checking npm dependency consistency")
        out.log(f"Found {len(report.shared_packages)} shared npm packages between main and webview")
        if report.npm_inconsistencies:
            out.log("\n⚠️ Version inconsistencies found between npm environments:", "warning")
            for item in report.npm_inconsistencies:
                out.log(
                    f"  - {item.name}: main({item.main_version}) vs webview({item.webview_version})",
                    "warning",
                )
        elif report.shared_packages:
            out.log("✅ All shared npm packages have consistent versions", "success")

        out.heading("Checking cross-language dependencies")
        if report.cross_language_issues:
            out.log("\n⚠️ Potential cross-language dependency conflicts:", "warning")
            for issue in report.cross_language_issues:
                out.log(
                    f"  - Python: {issue.python_version} / npm(main): {issue.js_version}",
                    "warning",
                )
            out.log("\n   ⓘ Review these packages to ensure version compatibility between languages")
        else:
            out.log("✅ No cross-language dependency conflicts found", "success")

        out.heading("Checking for unpinned Python dependencies")
        if report.unpinned_python_deps:
            out.log("\n⚠️ Found unpinned Python dependencies:", "warning")
            for dep in report.unpinned_python_deps:
                out.log(f"  - {dep}", "warning")
        elif report.python_packages:
            out.log("✅ All Python dependencies are properly pinned!", "success")


def check_dependencies(
    config: CheckerConfig,
    reporter: Reporter,
    mapping: Mapping[str, str] | None = None,
) -> CheckResult:
    """Run one full analysis and write the report (see :class:`DependencyChecker`)."""
    return DependencyChecker(config, reporter, mapping).run()
