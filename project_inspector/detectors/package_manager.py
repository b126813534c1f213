"""Package manager detection: lock files first, then the packageManager field."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from project_inspector.detectors.base import Detector, read_manifest
from project_inspector.models.project import PackageManagerKind

log = structlog.get_logger("project_inspector.detectors")

# Detection rules: (lock file, package manager)
# Ordered by priority; the first lock file present wins.
LOCKFILE_RULES: list[tuple[str, PackageManagerKind]] = [
    ("pnpm-lock.yaml", PackageManagerKind.PNPM),
    ("yarn.lock", PackageManagerKind.YARN),
    ("bun.lockb", PackageManagerKind.BUN),
    ("package-lock.json", PackageManagerKind.NPM),
]


def parse_package_manager_field(value: Any) -> PackageManagerKind | None:
    """Parse a corepack-style ``"<name>@<version>"`` string.

    Returns None for non-strings and for names outside PackageManagerKind.
    """
    if not isinstance(value, str) or not value:
        return None
    name = value.split("@", 1)[0].strip()
    try:
        return PackageManagerKind(name)
    except ValueError:
        return None


class PackageManagerDetector(Detector[PackageManagerKind]):
    """Detect which package manager manages a project."""

    name = "package_manager"
    default = PackageManagerKind.NPM

    async def _classify(self, root: Path) -> PackageManagerKind:
        for lock_file, kind in LOCKFILE_RULES:
            if await self._fs.exists(root / lock_file):
                return kind

        manifest = await read_manifest(self._fs, root)
        if manifest is not None and "packageManager" in manifest:
            raw = manifest["packageManager"]
            kind = parse_package_manager_field(raw)
            if kind is not None:
                return kind
            if self._config.verbose:
                log.warning("detector.unsupported_package_manager", value=raw, root=str(root))

        return PackageManagerKind.NPM
