"""Workspace (monorepo) root detection."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from project_inspector.detectors.base import Detector, read_manifest

# Manager-specific workspace config files, checked after the manifest field
WORKSPACE_CONFIG_FILES: list[str] = [
    "pnpm-workspace.yaml",
    "lerna.json",
]


def declared_workspace_patterns(manifest: dict[str, Any]) -> list[str] | None:
    """Return the glob patterns of the manifest's ``workspaces`` field.

    Handles both the array form and the object form (``{"packages": [...]}``).
    Returns None when the field is absent or empty-valued (null, "", false);
    an object without ``packages`` yields an empty list.
    """
    workspaces = manifest.get("workspaces")
    if not isinstance(workspaces, (list, dict)) and not workspaces:
        return None
    if isinstance(workspaces, list):
        return [str(p) for p in workspaces]
    if isinstance(workspaces, dict):
        packages = workspaces.get("packages")
        if isinstance(packages, list):
            return [str(p) for p in packages]
    return []


class WorkspaceDetector(Detector[bool]):
    """Detect whether a project root manages multiple sub-packages."""

    name = "workspace"
    default = False

    async def _classify(self, root: Path) -> bool:
        manifest = await read_manifest(self._fs, root)
        if manifest is None:
            return False

        if declared_workspace_patterns(manifest):
            return True

        for config_file in WORKSPACE_CONFIG_FILES:
            if await self._fs.exists(root / config_file):
                return True

        return False
