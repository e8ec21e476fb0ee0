"""CLI entry point: plutonium.

Subcommands:
    plutonium check                      # analyze the current directory
    plutonium check --root /path/to/repo
    plutonium check --json               # also print report data as JSON
    plutonium check --fail-on-issues     # exit 2 when anything was found (CI gate)
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from plutonium.core.logging import setup_logging
from plutonium.engines.dependency_checker import CheckerConfig, check_dependencies
from plutonium.exceptions import PlutoniumError
from plutonium.reporter import ConsoleReporter

_PATH = click.Path(path_type=Path)


def _build_config(
    root: Path,
    main_manifest: Path | None,
    webview_manifest: Path | None,
    requirements: Path | None,
    reports_dir: Path | None,
) -> CheckerConfig:
    """Default layout under ``root``, with any explicitly given path taking precedence."""
    defaults = CheckerConfig.from_root(root)
    return CheckerConfig(
        main_package_json=main_manifest or defaults.main_package_json,
        webview_package_json=webview_manifest or defaults.webview_package_json,
        python_requirements=requirements or defaults.python_requirements,
        reports_dir=reports_dir or defaults.reports_dir,
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose diagnostic logging")
def main(verbose: bool) -> None:
    """Plutonium: dependency consistency checker for npm + Python projects."""
    try:
        setup_logging(verbose)
    except ValueError as e:
        raise click.UsageError(str(e)) from e


@main.command("check")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    envvar="PLUTONIUM_ROOT",
    show_default=True,
    help="Project root holding package.json, webview-ui/ and python_backend/",
)
@click.option("--main-manifest", type=_PATH, default=None, help="Override the primary package.json")
@click.option("--webview-manifest", type=_PATH, default=None, help="Override the webview package.json")
@click.option("--requirements", type=_PATH, default=None, help="Override requirements.txt")
@click.option("--reports-dir", type=_PATH, default=None, help="Directory for the HTML report")
@click.option("--json", "as_json", is_flag=True, help="Print the report data as JSON on stdout")
@click.option("--fail-on-issues", is_flag=True, help="Exit with status 2 if any issue is found")
def check(
    root: Path,
    main_manifest: Path | None,
    webview_manifest: Path | None,
    requirements: Path | None,
    reports_dir: Path | None,
    as_json: bool,
    fail_on_issues: bool,
) -> None:
    """Analyze dependency manifests and write an HTML report."""
    config = _build_config(root, main_manifest, webview_manifest, requirements, reports_dir)
    reporter = ConsoleReporter(err=as_json)

    try:
        result = check_dependencies(config, reporter)
    except PlutoniumError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "reportPath": str(result.report_path),
            "summary": result.summary.to_dict(),
            "data": result.report.to_dict(),
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(f"\nTo view the full report open: {result.report_path}")

    if fail_on_issues and result.summary.total > 0:
        sys.exit(2)


if __name__ == "__main__":
    main()
