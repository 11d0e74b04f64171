"""Value types shared by snapshotting, planning and applying link changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Final, TypeAlias

BIN_DIR_NAME: Final[str] = ".bin"

BinarySet: TypeAlias = frozenset[Path]


@dataclass(frozen=True, slots=True)
class RegistryLocation:
    """Named registry folder (e.g. ``node_modules``) inside the global project."""

    name: str
    root_path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_path", Path(self.root_path))
        if not self.root_path.is_absolute():
            raise ValueError(f"Registry root must be absolute: {self.root_path}")

    @property
    def bin_dir(self) -> Path:
        return self.root_path / BIN_DIR_NAME


@dataclass(frozen=True, slots=True)
class OwnershipDecision:
    """Whether a path may be deleted, plus the real path the verdict was based on."""

    owned: bool
    real_path: Path | None = None

    def __bool__(self) -> bool:
        return self.owned


@dataclass(frozen=True, slots=True, order=True)
class LinkChange:
    """A binary in a registry ``.bin`` folder and its link in the global bin dir."""

    source: Path
    destination: Path


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationPlan:
    """Link changes derived from two snapshots of one run.

    ``to_add`` holds one change per destination; sources that lost a name
    collision are kept in ``shadowed`` so callers can report them.
    """

    to_remove: tuple[LinkChange, ...] = ()
    to_add: tuple[LinkChange, ...] = ()
    shadowed: tuple[LinkChange, ...] = ()

    @property
    def removed(self) -> BinarySet:
        return frozenset(change.source for change in self.to_remove)

    @property
    def added(self) -> BinarySet:
        return frozenset(change.source for change in (*self.to_add, *self.shadowed))

    @property
    def is_empty(self) -> bool:
        return not (self.to_remove or self.to_add or self.shadowed)


class LinkOutcome(StrEnum):
    """What happened to one planned link change."""

    LINKED = "linked"
    REPLACED = "replaced"
    REMOVED = "removed"
    SKIPPED_MISSING = "skipped_missing"
    SKIPPED_NOT_OWNED = "skipped_not_owned"
    SHADOWED = "shadowed"


@dataclass(frozen=True, slots=True)
class LinkResult:
    change: LinkChange
    outcome: LinkOutcome
    real_path: Path | None = None

    @property
    def is_conflict(self) -> bool:
        return self.outcome in {LinkOutcome.SKIPPED_NOT_OWNED, LinkOutcome.SHADOWED}


@dataclass(slots=True)
class ReconciliationReport:
    """Per-entry outcomes of one reconciliation run, in processing order."""

    plan: ReconciliationPlan = field(default_factory=ReconciliationPlan)
    results: list[LinkResult] = field(default_factory=list["LinkResult"])

    def record(self, change: LinkChange, outcome: LinkOutcome, real_path: Path | None = None) -> None:
        self.results.append(LinkResult(change=change, outcome=outcome, real_path=real_path))

    def with_outcome(self, outcome: LinkOutcome) -> list[LinkResult]:
        return [result for result in self.results if result.outcome is outcome]

    @property
    def conflicts(self) -> list[LinkResult]:
        return [result for result in self.results if result.is_conflict]

    def counts(self) -> dict[LinkOutcome, int]:
        counts = dict.fromkeys(LinkOutcome, 0)
        for result in self.results:
            counts[result.outcome] += 1
        return counts
