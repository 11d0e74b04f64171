"""Dependency pattern normalization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_RANGE: Final[str] = "latest"
ANY_RANGE: Final[str] = "*"


@dataclass(frozen=True, slots=True)
class NormalizedPattern:
    name: str
    range: str
    has_version: bool


def normalize_pattern(pattern: str) -> NormalizedPattern:
    """Split ``name@range`` into its parts, keeping scoped names (``@scope/name``) intact.

    A bare name gets the ``latest`` range; a trailing ``@`` with nothing after it
    means any version.
    """

    name = pattern
    is_scoped = name.startswith("@")
    if is_scoped:
        name = name[1:]

    range_ = DEFAULT_RANGE
    has_version = False
    head, sep, tail = name.partition("@")
    if sep:
        name = head
        if tail:
            range_ = tail
            has_version = True
        else:
            range_ = ANY_RANGE

    if is_scoped:
        name = f"@{name}"
    return NormalizedPattern(name=name, range=range_, has_version=has_version)


__all__ = ["ANY_RANGE", "DEFAULT_RANGE", "NormalizedPattern", "normalize_pattern"]
