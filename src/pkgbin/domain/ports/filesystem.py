"""Filesystem capabilities used by snapshotting and ownership checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@runtime_checkable
class Filesystem(Protocol):
    """Asynchronous filesystem port.

    Absence is signalled with ``FileNotFoundError`` (or ``False`` from
    :meth:`exists`); every other ``OSError`` is treated as unrecoverable.
    """

    async def exists(self, path: Path) -> bool:
        """Return whether a directory entry exists at ``path`` (dangling links count)."""
        ...

    async def realpath(self, path: Path) -> Path:
        """Resolve all symlinks in ``path``; raise ``FileNotFoundError`` if it is absent."""
        ...

    async def list_directory(self, path: Path) -> Sequence[str]:
        """Return the entry names directly under ``path``."""
        ...

    async def unlink(self, path: Path) -> None: ...


__all__ = ["Filesystem"]
