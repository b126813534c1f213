"""Detector base class and shared manifest helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TypeVar

import structlog

from project_inspector.exceptions import ParseError
from project_inspector.fs import FileSystem
from project_inspector.models.config import InspectorConfig

log = structlog.get_logger("project_inspector.detectors")

MANIFEST_FILE = "package.json"

T = TypeVar("T")


async def read_manifest(fs: FileSystem, root: Path) -> dict[str, Any] | None:
    """Load package.json under *root*.

    Returns None when the file does not exist. Raises ``ParseError`` when it
    exists but is unreadable, is not JSON, or is not a JSON object.
    """
    path = root / MANIFEST_FILE
    if not await fs.exists(path):
        return None
    data = await fs.read_json(path)
    if not isinstance(data, dict):
        raise ParseError(path, f"expected a JSON object, got {type(data).__name__}")
    return data


class Detector(ABC, Generic[T]):
    """A classification that cannot fail.

    Subclasses implement ``_classify``; ``detect`` wraps it so that any
    exception is swallowed and mapped to ``default``. Callers that need
    errors surfaced go through ProjectInspector.get_project_config instead.
    """

    name: str
    default: T

    def __init__(self, fs: FileSystem, config: InspectorConfig | None = None) -> None:
        self._fs = fs
        self._config = config or InspectorConfig()

    async def detect(self, root: str | Path) -> T:
        root = Path(root)
        try:
            return await self._classify(root)
        except Exception as e:
            if self._config.verbose:
                log.warning(
                    "detector.failed",
                    detector=self.name,
                    root=str(root),
                    error=str(e),
                    fallback=getattr(self.default, "value", self.default),
                )
            return self.default

    @abstractmethod
    async def _classify(self, root: Path) -> T:
        """Run the detection rules. May raise; ``detect`` contains it."""
        ...
