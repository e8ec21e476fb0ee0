"""Version reconciliation between two declared npm version ranges."""

from __future__ import annotations

import re

from packaging.version import Version

# First run of up to three dot-separated numeric components anywhere in the text
_COERCE_RE = re.compile(r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")

# Trailing wildcard segment, e.g. "20.x"
_WILDCARD_RE = re.compile(r"\.x$")

_RANGE_PREFIXES = ("^", "~")
_DEFAULT_PREFIX = "^"


def range_prefix(version: str) -> str:
    """Return the caret/tilde prefix of a version range, or ``""``."""
    for prefix in _RANGE_PREFIXES:
        if version.startswith(prefix):
            return prefix
    return ""


def parse_version(version: str | None) -> str | None:
    """Normalize a version range to a canonical ``major.minor.patch`` string.

    Strips one leading ``^`` or ``~``, turns a trailing ``.x`` into ``.0`` and
    coerces the first numeric run into three components.  Returns ``None``
    when nothing numeric can be found.

        >>> parse_version("^1.2")
        '1.2.0'
        >>> parse_version("20.x")
        '20.0.0'
        >>> parse_version("latest") is None
        True
    """
    if not version:
        return None

    clean = version[1:] if version.startswith(_RANGE_PREFIXES) else version
    if "x" in clean:
        clean = _WILDCARD_RE.sub(".0", clean)

    m = _COERCE_RE.search(clean)
    if m is None:
        return None
    major, minor, patch = (int(g or 0) for g in m.groups())
    return f"{major}.{minor}.{patch}"


def get_higher_version(v1: str | None, v2: str | None) -> str | None:
    """Pick the higher of two version ranges, keeping a caret/tilde prefix.

    If one side does not coerce to a version the other side is returned
    verbatim, so exotic range syntax survives untouched.  Otherwise the
    winner keeps its own prefix, borrows the loser's, or falls back to ``^``.
    Ties go to ``v2``.
    """
    parsed1 = parse_version(v1)
    parsed2 = parse_version(v2)

    if v1 is None or parsed1 is None:
        return v2
    if v2 is None or parsed2 is None:
        return v1

    if Version(parsed1) > Version(parsed2):
        winner, winner_raw, loser_raw = parsed1, v1, v2
    else:
        winner, winner_raw, loser_raw = parsed2, v2, v1

    prefix = range_prefix(winner_raw) or range_prefix(loser_raw) or _DEFAULT_PREFIX
    return prefix + winner
