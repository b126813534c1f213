"""project-inspector: detect how a JavaScript/TypeScript project is set up."""

__version__ = "0.1.0"

from project_inspector.exceptions import (
    CommandExecutionError,
    InspectorError,
    ManifestNotFoundError,
    ParseError,
)
from project_inspector.fs import FileSystem, LocalFileSystem
from project_inspector.inspector import ProjectInspector, create_inspector
from project_inspector.models.config import InspectorConfig
from project_inspector.models.project import (
    DependencySummary,
    FrameworkKind,
    PackageManagerKind,
    ProjectConfig,
    ProjectInfo,
)
from project_inspector.runner import CommandRunner, SubprocessRunner

__all__ = [
    "CommandExecutionError",
    "CommandRunner",
    "DependencySummary",
    "FileSystem",
    "FrameworkKind",
    "InspectorConfig",
    "InspectorError",
    "LocalFileSystem",
    "ManifestNotFoundError",
    "PackageManagerKind",
    "ParseError",
    "ProjectConfig",
    "ProjectInfo",
    "ProjectInspector",
    "SubprocessRunner",
    "create_inspector",
]
