"""Cross-language collision detection between Python and npm dependencies."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from plutonium.engines.dependency_checker.models import CrossLanguageIssue, PackageEntry

# Python distribution name -> npm package name for SDKs shipped in both ecosystems
DEFAULT_CROSS_LANGUAGE_MAPPING: dict[str, str] = {
    "openai": "openai",
    "anthropic": "@anthropic-ai/sdk",
    "google-genai": "@google/generative-ai",
    "azure-openai": "@azure/openai",
    "tiktoken": "tiktoken",
    "ollama": "ollama",
}

UNPINNED_MARKER = "unpinned"


def find_cross_language_issues(
    python_packages: Iterable[PackageEntry],
    npm_deps: Mapping[str, str],
    mapping: Mapping[str, str] | None = None,
) -> list[CrossLanguageIssue]:
    """Report every mapped package declared on both sides.

    Only presence is checked; versions are reported as-is for a human to
    compare.  Names must match the mapping exactly.
    """
    if mapping is None:
        mapping = DEFAULT_CROSS_LANGUAGE_MAPPING

    issues: list[CrossLanguageIssue] = []
    if not npm_deps:
        return issues

    for pkg in python_packages:
        js_name = mapping.get(pkg.name)
        if not js_name:
            continue
        js_version = npm_deps.get(js_name)
        if not js_version:
            continue
        issues.append(
            CrossLanguageIssue(
                name=pkg.name,
                python_version=f"{pkg.name}@{pkg.version or UNPINNED_MARKER}",
                js_version=f"{js_name}@{js_version}",
            )
        )
    return issues
