"""Framework detection from package.json dependency names."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from project_inspector.detectors.base import Detector, read_manifest
from project_inspector.models.project import FrameworkKind

# Detection rules: (dependency names, framework)
# Ordered by priority. Meta-frameworks come before the framework they build on.
FRAMEWORK_RULES: list[tuple[tuple[str, ...], FrameworkKind]] = [
    (("nuxt", "nuxt3"), FrameworkKind.NUXT),
    (("next",), FrameworkKind.NEXT),
    (("@remix-run/react",), FrameworkKind.REMIX),
    (("astro",), FrameworkKind.ASTRO),
    (("vue", "@vue/cli-service"), FrameworkKind.VUE),
    (("react", "react-dom"), FrameworkKind.REACT),
    (("@angular/core",), FrameworkKind.ANGULAR),
    (("svelte",), FrameworkKind.SVELTE),
    (("solid-js",), FrameworkKind.SOLID),
    (("@builder.io/qwik",), FrameworkKind.QWIK),
    (("lit",), FrameworkKind.LIT),
    (("preact",), FrameworkKind.PREACT),
]


def dependency_names(manifest: dict[str, Any]) -> set[str]:
    """Union of dependency and devDependency names. Versions are ignored."""
    names: set[str] = set()
    for key in ("dependencies", "devDependencies"):
        section = manifest.get(key)
        if isinstance(section, dict):
            names.update(section)
    return names


def classify_dependencies(names: set[str]) -> FrameworkKind:
    for packages, kind in FRAMEWORK_RULES:
        if any(pkg in names for pkg in packages):
            return kind
    return FrameworkKind.UNKNOWN


class FrameworkDetector(Detector[FrameworkKind]):
    """Detect the front-end framework a project depends on."""

    name = "framework"
    default = FrameworkKind.UNKNOWN

    async def _classify(self, root: Path) -> FrameworkKind:
        manifest = await read_manifest(self._fs, root)
        if manifest is None:
            return FrameworkKind.UNKNOWN
        return classify_dependencies(dependency_names(manifest))
