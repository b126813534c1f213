"""Data models for project classification and summary views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class FrameworkKind(Enum):
    """Front-end framework detected from manifest dependencies."""

    VUE = "vue"
    REACT = "react"
    ANGULAR = "angular"
    SVELTE = "svelte"
    SOLID = "solid"
    QWIK = "qwik"
    LIT = "lit"
    PREACT = "preact"
    NUXT = "nuxt"
    NEXT = "next"
    REMIX = "remix"
    ASTRO = "astro"
    UNKNOWN = "unknown"


class PackageManagerKind(Enum):
    """Package manager; the value doubles as the executable name."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


@dataclass
class ProjectConfig:
    """Assembled configuration for a single project root."""

    name: str
    type: FrameworkKind
    root: Path
    package_manager: PackageManagerKind
    manifest: dict[str, Any]  # raw package.json, passed through untouched
    is_workspace_root: bool = False
    workspace_patterns: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "root": str(self.root),
            "package_manager": self.package_manager.value,
            "manifest": self.manifest,
            "is_workspace_root": self.is_workspace_root,
            "workspace_patterns": self.workspace_patterns,
        }


@dataclass
class DependencySummary:
    """Declared dependencies, name -> version range."""

    prod: dict[str, str] = field(default_factory=dict)
    dev: dict[str, str] = field(default_factory=dict)


@dataclass
class ProjectInfo:
    """Dependency and script summary derived from a ProjectConfig."""

    config: ProjectConfig
    dependencies: DependencySummary = field(default_factory=DependencySummary)
    scripts: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "dependencies": {
                "prod": dict(self.dependencies.prod),
                "dev": dict(self.dependencies.dev),
            },
            "scripts": dict(self.scripts),
        }
