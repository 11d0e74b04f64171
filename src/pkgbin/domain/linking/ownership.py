"""Decide whether a path in the global bin dir was created for this project.

The check resolves the candidate through all symlinks and accepts it only when
the result lies inside the project root. A file placed inside the project tree
by some other tool passes too; anything resolving outside the tree never does.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .types import OwnershipDecision

if TYPE_CHECKING:
    from pkgbin.domain.ports.filesystem import Filesystem


def is_within(path: Path, root: Path) -> bool:
    """Segment-aware containment: ``/home/user-2`` is not inside ``/home/user``."""

    normalized_path = Path(os.path.normpath(path))
    normalized_root = Path(os.path.normpath(root))
    return normalized_path.is_relative_to(normalized_root)


@dataclass(slots=True)
class OwnershipVerifier:
    fs: Filesystem

    async def is_owned(self, project_root: Path, candidate: Path) -> OwnershipDecision:
        try:
            real_path = await self.fs.realpath(candidate)
        except FileNotFoundError:
            return OwnershipDecision(owned=False)
        return OwnershipDecision(owned=is_within(real_path, project_root), real_path=real_path)
