"""Parser for Python requirements.txt files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from plutonium.engines.dependency_checker.models import PackageEntry, RequirementsResult

log = structlog.get_logger("plutonium.engine.requirements")

# Checked in order; the first operator contained in the line wins.
REQUIREMENT_OPERATORS: tuple[str, ...] = ("==", ">=", "<=", ">", "<", "~=")


@dataclass(frozen=True)
class Pinned:
    """A requirement declared with a version operator."""

    name: str
    operator: str
    version: str

    @property
    def constraint(self) -> str:
        return self.operator + self.version


@dataclass(frozen=True)
class Unpinned:
    """A requirement declared by name only."""

    name: str


ParsedRequirement = Pinned | Unpinned


def parse_requirement_line(line: str) -> ParsedRequirement:
    """Split a requirement (comment already stripped) into name and constraint.

    Anything that does not contain a known operator is taken to be a bare
    package name, so odd lines degrade to ``Unpinned`` instead of failing.
    """
    text = line.strip()
    for operator in REQUIREMENT_OPERATORS:
        if operator in text:
            parts = text.split(operator)
            return Pinned(name=parts[0].strip(), operator=operator, version=parts[1].strip())
    return Unpinned(name=text)


def parse_requirements_text(content: str, source_file: str) -> RequirementsResult:
    result = RequirementsResult()

    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parsed = parse_requirement_line(line.split("#", 1)[0])
        if isinstance(parsed, Pinned):
            version: str | None = parsed.constraint
        else:
            version = None
            result.unpinned.append(parsed.name)

        result.packages.append(
            PackageEntry(name=parsed.name, version=version, source_file=source_file)
        )

    return result


def parse_python_requirements(file_path: Path) -> RequirementsResult:
    """Read a requirements file.

    A missing or unreadable file yields an empty result; read failures are
    recorded on ``RequirementsResult.error`` instead of aborting the run.
    """
    if not file_path.is_file():
        log.debug("requirements.missing", path=str(file_path))
        return RequirementsResult()

    try:
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        reason = e.strerror or str(e)
        log.warning("requirements.unreadable", path=str(file_path), error=reason)
        return RequirementsResult(error=reason)

    result = parse_requirements_text(content, file_path.name)
    log.debug(
        "requirements.parsed",
        path=str(file_path),
        packages=len(result.packages),
        unpinned=len(result.unpinned),
    )
    return result
