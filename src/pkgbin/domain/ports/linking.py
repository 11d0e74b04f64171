"""Ports for creating global binary links."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class Linker(Protocol):
    """Expose ``source`` at ``destination`` (symlink or platform shim)."""

    async def create_link(self, source: Path, destination: Path) -> None: ...


__all__ = ["Linker"]
