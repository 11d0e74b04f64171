"""Ports for the external install/remove steps and installed package listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pkgbin.domain.linking.types import RegistryLocation


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """Name, version and exposed binary names of one installed package."""

    name: str
    version: str
    bins: tuple[str, ...] = ()

    @property
    def human(self) -> str:
        return f"{self.name}@{self.version}"


class MutationFailedError(RuntimeError):
    """Raised when the external install/remove command fails."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        super().__init__(f"Command {' '.join(command)!r} exited with status {returncode}")
        self.command = tuple(command)
        self.returncode = returncode


@runtime_checkable
class MutatingOperation(Protocol):
    """Install or remove packages in the global folder.

    On success the registry folders reflect the new package set; on failure
    the operation raises and no binary changes need reconciling.
    """

    async def __call__(self, patterns: Sequence[str]) -> None: ...


@runtime_checkable
class InstalledPackages(Protocol):
    """Read-only view of the packages installed in the given registries."""

    async def __call__(self, registries: Sequence[RegistryLocation]) -> Sequence[InstalledPackage]: ...


__all__ = ["InstalledPackage", "InstalledPackages", "MutatingOperation", "MutationFailedError"]
