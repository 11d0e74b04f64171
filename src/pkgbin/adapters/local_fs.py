"""Local disk implementations of the filesystem and linker ports."""

from __future__ import annotations

import asyncio
import errno
import os
from contextlib import suppress
from pathlib import Path
from typing import Final

BIN_MODE: Final[int] = 0o755


def _realpath(path: Path) -> Path:
    if not os.path.lexists(path):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    # non-strict: a dangling link still resolves to where it points
    return Path(os.path.realpath(path))


def _list_directory(path: Path) -> list[str]:
    return sorted(os.listdir(path))


def _unlink(path: Path) -> None:
    with suppress(FileNotFoundError):
        os.unlink(path)


def link_bin(source: Path, destination: Path) -> None:
    """Symlink ``destination`` to ``source`` and make the target executable."""

    destination.parent.mkdir(parents=True, exist_ok=True)
    os.symlink(source, destination)
    os.chmod(destination, BIN_MODE)


class LocalFilesystem:
    """Blocking ``os`` calls moved off the event loop."""

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(os.path.lexists, path)

    async def realpath(self, path: Path) -> Path:
        return await asyncio.to_thread(_realpath, path)

    async def list_directory(self, path: Path) -> list[str]:
        return await asyncio.to_thread(_list_directory, path)

    async def unlink(self, path: Path) -> None:
        await asyncio.to_thread(_unlink, path)


class SymlinkLinker:
    async def create_link(self, source: Path, destination: Path) -> None:
        await asyncio.to_thread(link_bin, source, destination)


__all__ = ["LocalFilesystem", "SymlinkLinker", "link_bin"]
