"""Rule-list detectors: each one classifies a project root and never raises."""

from project_inspector.detectors.base import MANIFEST_FILE, Detector, read_manifest
from project_inspector.detectors.framework import FRAMEWORK_RULES, FrameworkDetector
from project_inspector.detectors.package_manager import LOCKFILE_RULES, PackageManagerDetector
from project_inspector.detectors.workspace import WORKSPACE_CONFIG_FILES, WorkspaceDetector

__all__ = [
    "FRAMEWORK_RULES",
    "LOCKFILE_RULES",
    "MANIFEST_FILE",
    "WORKSPACE_CONFIG_FILES",
    "Detector",
    "FrameworkDetector",
    "PackageManagerDetector",
    "WorkspaceDetector",
    "read_manifest",
]
