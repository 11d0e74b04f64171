"""Install/remove operations delegated to an external package manager command."""

from __future__ import annotations

import asyncio
import shlex
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pkgbin.domain.ports.packages import MutationFailedError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubprocessPackageOperation:
    """Run ``command + patterns`` inside the global folder."""

    command: tuple[str, ...]
    cwd: Path

    async def __call__(self, patterns: Sequence[str]) -> None:
        argv = [*self.command, *patterns]
        if not argv:
            raise ValueError("Package manager command must not be empty")
        await asyncio.to_thread(self.cwd.mkdir, parents=True, exist_ok=True)

        log.info("Running %s in %s", shlex.join(argv), self.cwd)
        process = await asyncio.create_subprocess_exec(*argv, cwd=self.cwd)
        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        if returncode != 0:
            raise MutationFailedError(argv, returncode)


__all__ = ["SubprocessPackageOperation"]
