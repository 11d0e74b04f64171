"""Enumerate the binaries currently exposed by the configured registries."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgbin.domain.ports.filesystem import Filesystem

    from .types import BinarySet, RegistryLocation

log = getLogger(__name__)


@dataclass(slots=True)
class BinarySnapshotter:
    """Build a fresh :data:`BinarySet` on every call; nothing is cached."""

    fs: Filesystem

    async def snapshot(self, registries: Iterable[RegistryLocation]) -> BinarySet:
        """Collect every entry directly under each registry's ``.bin`` folder.

        A missing ``.bin`` folder contributes nothing. Registries are scanned
        concurrently; the union does not depend on their order. An I/O failure
        in one registry cancels the others and propagates.
        """

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self._registry_bins(registry)) for registry in registries]
        except ExceptionGroup as errors:
            # sibling listings are cancelled; surface the first failure unwrapped
            raise errors.exceptions[0] from errors
        return frozenset().union(*(task.result() for task in tasks))

    async def _registry_bins(self, registry: RegistryLocation) -> BinarySet:
        bin_dir = registry.bin_dir
        if not await self.fs.exists(bin_dir):
            log.debug("No binaries for registry %s: %s does not exist", registry.name, bin_dir)
            return frozenset()
        try:
            names = await self.fs.list_directory(bin_dir)
        except FileNotFoundError:
            return frozenset()
        return frozenset(bin_dir / name for name in names)
