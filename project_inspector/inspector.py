"""ProjectInspector: classify a JS/TS project root and delegate to its package manager."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from project_inspector.detectors.base import MANIFEST_FILE, read_manifest
from project_inspector.detectors.framework import FrameworkDetector
from project_inspector.detectors.package_manager import PackageManagerDetector
from project_inspector.detectors.workspace import WorkspaceDetector, declared_workspace_patterns
from project_inspector.exceptions import ManifestNotFoundError
from project_inspector.fs import FileSystem, LocalFileSystem
from project_inspector.models.config import InspectorConfig
from project_inspector.models.project import (
    DependencySummary,
    FrameworkKind,
    PackageManagerKind,
    ProjectConfig,
    ProjectInfo,
)
from project_inspector.runner import CommandRunner, SubprocessRunner

log = structlog.get_logger("project_inspector.inspector")


def _string_map(value: object) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return dict(value)


class ProjectInspector:
    """Point-in-time inspector for a project directory.

    Nothing is cached: every call re-reads package.json and the signal files,
    so results reflect the directory at call time.

    Detectors (``detect_framework_kind``, ``detect_package_manager``,
    ``is_workspace_root``) never raise. ``get_project_config``,
    ``get_project_info``, ``run_script`` and ``install_dependencies`` raise
    ``InspectorError`` subclasses.
    """

    def __init__(
        self,
        config: InspectorConfig | None = None,
        fs: FileSystem | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config or InspectorConfig()
        self._fs = fs or LocalFileSystem()
        self._runner = runner or SubprocessRunner()
        self._framework = FrameworkDetector(self._fs, self.config)
        self._package_manager = PackageManagerDetector(self._fs, self.config)
        self._workspace = WorkspaceDetector(self._fs, self.config)

    # ── detectors ────────────────────────────────────────────────────────

    async def detect_framework_kind(self, root: str | Path) -> FrameworkKind:
        return await self._framework.detect(root)

    async def detect_package_manager(self, root: str | Path) -> PackageManagerKind:
        return await self._package_manager.detect(root)

    async def is_workspace_root(self, root: str | Path) -> bool:
        return await self._workspace.detect(root)

    # ── assembly ─────────────────────────────────────────────────────────

    async def get_project_config(self, root: str | Path) -> ProjectConfig:
        """Assemble the full configuration for *root*.

        Raises ``ManifestNotFoundError`` if package.json is missing and
        ``ParseError`` if it cannot be decoded.
        """
        root = Path(root)
        manifest = await read_manifest(self._fs, root)
        if manifest is None:
            raise ManifestNotFoundError(root / MANIFEST_FILE)

        kind, package_manager, is_workspace = await asyncio.gather(
            self.detect_framework_kind(root),
            self.detect_package_manager(root),
            self.is_workspace_root(root),
        )

        name = manifest.get("name")
        if not isinstance(name, str) or not name:
            name = root.resolve().name

        # Patterns only come from the manifest. A root detected through
        # pnpm-workspace.yaml or lerna.json alone keeps workspace_patterns=None.
        patterns = declared_workspace_patterns(manifest) if is_workspace else None

        return ProjectConfig(
            name=name,
            type=kind,
            root=root,
            package_manager=package_manager,
            manifest=manifest,
            is_workspace_root=is_workspace,
            workspace_patterns=patterns,
        )

    async def get_project_info(self, root: str | Path) -> ProjectInfo:
        config = await self.get_project_config(root)
        manifest = config.manifest
        return ProjectInfo(
            config=config,
            dependencies=DependencySummary(
                prod=_string_map(manifest.get("dependencies")),
                dev=_string_map(manifest.get("devDependencies")),
            ),
            scripts=_string_map(manifest.get("scripts")),
        )

    # ── delegated commands ───────────────────────────────────────────────

    async def run_script(self, root: str | Path, script_name: str) -> None:
        """Run ``<pm> run <script_name>`` in *root* with inherited stdio."""
        if not script_name:
            raise ValueError("script_name must be a non-empty string")
        await self._delegate(root, ["run", script_name])

    async def install_dependencies(self, root: str | Path) -> None:
        """Run ``<pm> install`` in *root* with inherited stdio."""
        await self._delegate(root, ["install"])

    async def _delegate(self, root: str | Path, args: list[str]) -> None:
        config = await self.get_project_config(root)
        executable = config.package_manager.value
        if self.config.verbose:
            log.info("command.start", executable=executable, args=args, cwd=str(config.root))
        await self._runner.run(executable, args, config.root)


def create_inspector(config: InspectorConfig | None = None) -> ProjectInspector:
    """Create a ProjectInspector with the default filesystem and process runner."""
    return ProjectInspector(config=config)
