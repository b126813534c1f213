"""Custom exceptions for project-inspector."""

from __future__ import annotations

from pathlib import Path


class InspectorError(Exception):
    """Base exception for all inspector errors."""


class ManifestNotFoundError(InspectorError):
    """Raised when a project root has no package.json."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"No package.json found at {self.path}")


class ParseError(InspectorError):
    """Raised when a JSON document cannot be read or decoded."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class CommandExecutionError(InspectorError):
    """Raised when a delegated package-manager command fails.

    ``returncode`` is None when the process could not be started at all
    (e.g. the executable is not on PATH).
    """

    def __init__(self, command: list[str], returncode: int | None, reason: str):
        self.command = list(command)
        self.returncode = returncode
        self.reason = reason
        super().__init__(f"Command {' '.join(self.command)!r} failed: {reason}")
