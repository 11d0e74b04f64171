"""Domain port definitions for adapters."""

from __future__ import annotations

from .filesystem import Filesystem
from .linking import Linker
from .packages import (
    InstalledPackage,
    InstalledPackages,
    MutatingOperation,
    MutationFailedError,
)
from .reporting import Reporter

__all__ = [
    "Filesystem",
    "InstalledPackage",
    "InstalledPackages",
    "Linker",
    "MutatingOperation",
    "MutationFailedError",
    "Reporter",
]
