"""Shared pytest fixtures for project-inspector tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from project_inspector.inspector import ProjectInspector
from project_inspector.models.config import InspectorConfig


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Write a package.json into tmp_path (or a given directory) and return its root."""

    def _write(manifest: dict[str, Any], root: Path | None = None) -> Path:
        root = root or tmp_path
        root.mkdir(parents=True, exist_ok=True)
        (root / "package.json").write_text(json.dumps(manifest))
        return root

    return _write


@pytest.fixture
def inspector() -> ProjectInspector:
    return ProjectInspector()


@pytest.fixture
def verbose_inspector() -> ProjectInspector:
    return ProjectInspector(config=InspectorConfig(verbose=True))
