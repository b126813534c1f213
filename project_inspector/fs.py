"""Filesystem collaborator: existence checks and JSON reads off the event loop."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from project_inspector.exceptions import ParseError


@runtime_checkable
class FileSystem(Protocol):
    """Interface the inspector needs from the filesystem."""

    async def exists(self, path: Path) -> bool: ...

    async def read_json(self, path: Path) -> Any: ...


class LocalFileSystem:
    """Default FileSystem backed by the local disk."""

    async def exists(self, path: Path) -> bool:
        """Return True if *path* exists. Never raises."""
        try:
            return await asyncio.to_thread(path.exists)
        except OSError:
            return False

    async def read_json(self, path: Path) -> Any:
        """Read and decode a JSON file.

        Raises ``ParseError`` if the file cannot be read or is not valid JSON.
        """
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(path, str(e)) from e
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(path, str(e)) from e
