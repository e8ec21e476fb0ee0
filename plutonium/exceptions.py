"""Custom exceptions for Plutonium."""

from __future__ import annotations

from pathlib import Path


class PlutoniumError(Exception):
    """Base exception for all dependency checker errors."""


class ManifestError(PlutoniumError):
    """Raised when a manifest exists but cannot be parsed.

    A syntactically broken manifest means a broken project, so the run is
    aborted instead of continuing with empty data.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Malformed manifest {self.path}: {reason}")


class ReportWriteError(PlutoniumError):
    """Raised when the HTML report cannot be written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write report {self.path}: {reason}")
