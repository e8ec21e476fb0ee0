"""HTML report rendering for dependency analysis results."""

from __future__ import annotations

import html
from datetime import datetime, timezone
from pathlib import Path

import structlog

from plutonium.engines.dependency_checker.models import (
    AnalysisReport,
    CrossLanguageIssue,
    PackageEntry,
)
from plutonium.exceptions import ReportWriteError

log = structlog.get_logger("plutonium.engine.report")

REPORT_FILENAME = "dependency-report.html"

_STYLE = """\
    :root {
      color-scheme: dark;
      --primary-color: #bb86fc;
      --warning-color: #ffb74d;
      --error-color: #cf6679;
      --success-color: #81c784;
      --background-color: #121212;
      --card-bg: #1e1e1e;
      --text-color: #e0e0e0;
      --border-color: #333333;
    }
    @media (prefers-color-scheme: light) {
      :root {
        color-scheme: light;
        --primary-color: #6200ee;
        --warning-color: #ff9800;
        --error-color: #b00020;
        --success-color: #4caf50;
        --background-color: #f5f5f5;
        --card-bg: #ffffff;
        --text-color: #333333;
        --border-color: #dddddd;
      }
    }
    body {
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
      line-height: 1.6;
      color: var(--text-color);
      background-color: var(--background-color);
      margin: 0;
    }
    .container { max-width: 1200px; margin: 0 auto; padding: 0 20px; }
    header {
      padding: 30px 0;
      text-align: center;
      border-bottom: 1px solid var(--border-color);
      margin-bottom: 40px;
    }
    h1, h2, h3 { color: var(--primary-color); font-weight: 600; }
    .card {
      background-color: var(--card-bg);
      border-radius: 8px;
      padding: 25px;
      margin-bottom: 30px;
      border: 1px solid var(--border-color);
    }
    .info { color: var(--primary-color); }
    .warning { color: var(--warning-color); }
    .error { color: var(--error-color); }
    .success { color: var(--success-color); }
    table { width: 100%; border-collapse: collapse; margin: 20px 0; }
    th, td { padding: 12px 15px; text-align: left; border-bottom: 1px solid var(--border-color); }
    th { font-weight: 600; color: var(--primary-color); }
    .tabs { display: flex; flex-wrap: wrap; margin-bottom: 20px; }
    .tab { padding: 12px 24px; cursor: pointer; border-bottom: 2px solid transparent; }
    .tab.active { border-bottom-color: var(--primary-color); color: var(--primary-color); }
    .tab-content { display: none; }
    .tab-content.active { display: block; }
    .summary-stats {
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
      gap: 20px;
    }
    .stat-card { border-radius: 8px; padding: 20px; text-align: center;
                 border: 1px solid var(--border-color); }
    .stat-value { font-size: 36px; font-weight: 700; margin: 10px 0; }
    .search-box {
      width: 100%;
      padding: 10px 15px;
      font-size: 16px;
      border-radius: 6px;
      border: 1px solid var(--border-color);
      background-color: transparent;
      color: var(--text-color);
    }
    footer { margin-top: 60px; padding: 20px 0; text-align: center; font-size: 14px; opacity: 0.7; }
"""

_SCRIPT = """\
    document.addEventListener('DOMContentLoaded', function() {
      const tabs = document.querySelectorAll('.tab');
      const tabContents = document.querySelectorAll('.tab-content');
      tabs.forEach(tab => {
        tab.addEventListener('click', function() {
          tabs.forEach(t => t.classList.remove('active'));
          tabContents.forEach(c => c.classList.remove('active'));
          tab.classList.add('active');
          document.getElementById('tab-' + tab.getAttribute('data-tab')).classList.add('active');
        });
      });

      function setupSearch(inputId, tableId) {
        const searchInput = document.getElementById(inputId);
        const table = document.getElementById(tableId);
        if (!searchInput || !table) {
          return;
        }
        searchInput.addEventListener('input', function() {
          const term = this.value.toLowerCase();
          Array.from(table.getElementsByTagName('tr')).forEach(row => {
            row.style.display = row.textContent.toLowerCase().includes(term) ? '' : 'none';
          });
        });
      }

      setupSearch('main-npm-search', 'main-npm-packages');
      setupSearch('webview-npm-search', 'webview-npm-packages');
      setupSearch('python-packages-search', 'python-packages');
    });
"""


def render_html_report(report: AnalysisReport) -> str:
    """Return the standalone HTML document for an analysis report."""
    generated_at = report.generated_at or datetime.now(timezone.utc)
    timestamp = generated_at.strftime("%Y-%m-%d %H:%M:%S")

    return f"""\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Plutonium Dependency Analysis</title>
  <style>
{_STYLE}  </style>
</head>
<body>
  <header>
    <div class="container">
      <h1>Dependency Analysis Report</h1>
      <p>Generated on {timestamp}</p>
    </div>
  </header>

  <div class="container">
    <div class="card">
      <h2>Summary</h2>
      <div class="summary-stats">
{_stat_card("Python Packages", len(report.python_packages))}
{_stat_card("Main npm Packages", len(report.main_packages))}
{_stat_card("Webview npm Packages", len(report.webview_packages))}
{_stat_card("Shared Packages", len(report.shared_packages))}
      </div>
    </div>

    <div class="tabs">
      <div class="tab active" data-tab="overview">Overview</div>
      <div class="tab" data-tab="npm">npm Packages</div>
      <div class="tab" data-tab="python">Python Packages</div>
      <div class="tab" data-tab="cross-language">Cross-Language</div>
    </div>

    <div class="tab-content active" id="tab-overview">
      <div class="card">
        <h2>Dependency Overview</h2>
{_format_inconsistencies(report)}
{_format_cross_language_overview(report.cross_language_issues)}
{_format_unpinned(report.unpinned_python_deps)}
      </div>
    </div>

    <div class="tab-content" id="tab-npm">
      <div class="card">
        <h2>npm Packages</h2>
        <h3>Main npm Dependencies ({len(report.main_packages)})</h3>
{_format_npm_table(report.main_packages, "main-npm")}
        <h3>Webview npm Dependencies ({len(report.webview_packages)})</h3>
{_format_npm_table(report.webview_packages, "webview-npm")}
      </div>
    </div>

    <div class="tab-content" id="tab-python">
      <div class="card">
        <h2>Python Dependencies</h2>
{_format_python_table(report.python_packages)}
      </div>
    </div>

    <div class="tab-content" id="tab-cross-language">
      <div class="card">
        <h2>Cross-Language Dependencies</h2>
{_format_cross_language_tab(report.cross_language_issues)}
      </div>
    </div>

    <footer>Generated by Plutonium</footer>
  </div>

  <script>
{_SCRIPT}  </script>
</body>
</html>
"""


def write_html_report(report: AnalysisReport, reports_dir: Path) -> Path:
    """Render the report and overwrite ``reports_dir/dependency-report.html``."""
    report_path = reports_dir / REPORT_FILENAME
    document = render_html_report(report)
    try:
        reports_dir.mkdir(parents=True, exist_ok=True)
        report_path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(report_path, e.strerror or str(e)) from e
    log.info("report.written", path=str(report_path), size=len(document))
    return report_path


def _esc(text: str) -> str:
    return html.escape(text, quote=True)


def _stat_card(label: str, value: int) -> str:
    return (
        '        <div class="stat-card">'
        f'<div class="stat-label">{_esc(label)}</div>'
        f'<div class="stat-value">{value}</div></div>'
    )


def _table(headers: list[str], rows: list[list[str]], body_id: str | None = None) -> str:
    """Build a table; cells must already be escaped."""
    head = "".join(f"<th>{h}</th>" for h in headers)
    body_attrs = f' class="searchable-content" id="{body_id}"' if body_id else ""
    body = "\n".join(
        "          <tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )
    return (
        "        <table>\n"
        f"          <thead><tr>{head}</tr></thead>\n"
        f"          <tbody{body_attrs}>\n{body}\n          </tbody>\n"
        "        </table>"
    )


def _search_box(input_id: str) -> str:
    return (
        '        <div class="search-container">'
        f'<input type="text" class="search-box" id="{input_id}" placeholder="Search packages...">'
        "</div>"
    )


def _format_inconsistencies(report: AnalysisReport) -> str:
    if not report.npm_inconsistencies:
        return "        <p>✅ No npm version inconsistencies found.</p>"
    rows = [
        [
            _esc(item.name),
            _esc(item.main_version),
            _esc(item.webview_version),
            f'<span class="success">{_esc(item.recommended or "")}</span>',
        ]
        for item in report.npm_inconsistencies
    ]
    return (
        "        <h3>npm Version Inconsistencies</h3>\n"
        "        <p>The following packages have different versions between main and"
        " webview environments:</p>\n"
        + _table(["Package", "Main Version", "Webview Version", "Recommended"], rows)
    )


def _cross_language_table(issues: list[CrossLanguageIssue]) -> str:
    rows = [[_esc(i.name), _esc(i.python_version), _esc(i.js_version)] for i in issues]
    return _table(["Package", "Python Version", "JavaScript Version"], rows)


def _format_cross_language_overview(issues: list[CrossLanguageIssue]) -> str:
    if not issues:
        return "        <p>✅ No cross-language dependency conflicts found.</p>"
    return (
        "        <h3>Cross-language Dependency Conflicts</h3>\n"
        "        <p>Potential version conflicts between Python and JavaScript packages:</p>\n"
        + _cross_language_table(issues)
        + '\n        <p class="info"><i>Note: Review these packages to ensure version'
        " compatibility between languages</i></p>"
    )


def _format_cross_language_tab(issues: list[CrossLanguageIssue]) -> str:
    if not issues:
        return "        <p>✅ No cross-language dependency conflicts detected.</p>"
    return (
        "        <p>The following packages exist in both Python and JavaScript environments"
        " with potentially incompatible versions:</p>\n"
        + _cross_language_table(issues)
        + "\n        <p>To resolve these issues, consider:</p>\n"
        "        <ul>\n"
        "          <li>Updating either the Python or JavaScript package to a compatible"
        " version</li>\n"
        "          <li>Verifying the packages are truly equivalent (some may have similar"
        " names but different functionality)</li>\n"
        "        </ul>"
    )


def _format_unpinned(unpinned: list[str]) -> str:
    if not unpinned:
        return "        <p>✅ All Python dependencies are properly pinned.</p>"
    items = "".join(f"<li>{_esc(dep)}</li>" for dep in unpinned)
    return (
        "        <h3>Unpinned Python Dependencies</h3>\n"
        "        <p>The following Python dependencies are not pinned to specific versions:</p>\n"
        f"        <ul>{items}</ul>\n"
        '        <p class="warning">Unpinned dependencies can lead to inconsistent builds and'
        " security issues. Consider pinning these dependencies to specific versions.</p>"
    )


def _format_npm_table(packages: list[PackageEntry], prefix: str) -> str:
    rows = [
        [_esc(p.name), _esc(p.version or ""), _esc(p.type.value if p.type else "")]
        for p in packages
    ]
    return (
        _search_box(f"{prefix}-search")
        + "\n"
        + _table(["Package", "Version", "Type"], rows, body_id=f"{prefix}-packages")
    )


def _format_python_table(packages: list[PackageEntry]) -> str:
    rows = [[_esc(p.name), _esc(p.version) if p.version else "<i>not pinned</i>"] for p in packages]
    return (
        _search_box("python-packages-search")
        + "\n"
        + _table(["Package", "Version"], rows, body_id="python-packages")
    )
