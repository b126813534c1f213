"""Tests for InspectorConfig, the filesystem collaborator and exceptions."""

from __future__ import annotations

from pathlib import Path

import pytest

from project_inspector.exceptions import CommandExecutionError, ManifestNotFoundError, ParseError
from project_inspector.fs import FileSystem, LocalFileSystem
from project_inspector.models.config import InspectorConfig


class TestInspectorConfig:
    def test_default_is_quiet(self):
        assert InspectorConfig().verbose is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_from_env_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("PROJECT_INSPECTOR_VERBOSE", raw)
        assert InspectorConfig.from_env().verbose is True

    @pytest.mark.parametrize("raw", ["", "0", "false", "nope"])
    def test_from_env_falsy(self, monkeypatch, raw):
        monkeypatch.setenv("PROJECT_INSPECTOR_VERBOSE", raw)
        assert InspectorConfig.from_env().verbose is False

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("PROJECT_INSPECTOR_VERBOSE", raising=False)
        assert InspectorConfig.from_env().verbose is False


class TestLocalFileSystem:
    def test_satisfies_protocol(self):
        assert isinstance(LocalFileSystem(), FileSystem)

    @pytest.mark.asyncio
    async def test_exists(self, tmp_path: Path):
        fs = LocalFileSystem()
        (tmp_path / "yarn.lock").write_text("")
        assert await fs.exists(tmp_path / "yarn.lock") is True
        assert await fs.exists(tmp_path / "bun.lockb") is False

    @pytest.mark.asyncio
    async def test_read_json(self, tmp_path: Path):
        (tmp_path / "lerna.json").write_text('{"version": "1.0.0"}')
        assert await LocalFileSystem().read_json(tmp_path / "lerna.json") == {"version": "1.0.0"}

    @pytest.mark.asyncio
    async def test_read_json_invalid(self, tmp_path: Path):
        (tmp_path / "package.json").write_text("{,}")
        with pytest.raises(ParseError) as exc_info:
            await LocalFileSystem().read_json(tmp_path / "package.json")
        assert exc_info.value.path == tmp_path / "package.json"

    @pytest.mark.asyncio
    async def test_read_json_missing(self, tmp_path: Path):
        with pytest.raises(ParseError):
            await LocalFileSystem().read_json(tmp_path / "package.json")


class TestExceptions:
    def test_manifest_not_found_message(self, tmp_path: Path):
        err = ManifestNotFoundError(tmp_path / "package.json")
        assert "package.json" in str(err)

    def test_command_error_message(self):
        err = CommandExecutionError(["pnpm", "run", "build"], 2, "exit code 2")
        assert err.returncode == 2
        assert "pnpm run build" in str(err)
