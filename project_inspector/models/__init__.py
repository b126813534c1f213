"""Data models for project inspection."""

from project_inspector.models.config import InspectorConfig
from project_inspector.models.project import (
    DependencySummary,
    FrameworkKind,
    PackageManagerKind,
    ProjectConfig,
    ProjectInfo,
)

__all__ = [
    "DependencySummary",
    "FrameworkKind",
    "InspectorConfig",
    "PackageManagerKind",
    "ProjectConfig",
    "ProjectInfo",
]
