"""Pure diff of two binary snapshots into link changes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import LinkChange, ReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from .types import BinarySet


def destination_for(source: Path, bin_dir: Path) -> Path:
    return bin_dir / source.name


def _ordered(sources: Iterable[Path], precedence: Sequence[Path]) -> list[Path]:
    ranks = {bin_dir: index for index, bin_dir in enumerate(precedence)}
    return sorted(sources, key=lambda source: (ranks.get(source.parent, -1), str(source)))


def _by_destination(
    sources: Iterable[Path], *, bin_dir: Path, precedence: Sequence[Path]
) -> tuple[list[LinkChange], list[LinkChange]]:
    winners: dict[Path, LinkChange] = {}
    losers: list[LinkChange] = []
    for source in _ordered(sources, precedence):
        change = LinkChange(source=source, destination=destination_for(source, bin_dir))
        previous = winners.get(change.destination)
        if previous is not None:
            losers.append(previous)
        winners[change.destination] = change
    return sorted(winners.values()), sorted(losers)


def plan_reconciliation(
    before: BinarySet,
    after: BinarySet,
    *,
    bin_dir: Path,
    precedence: Sequence[Path] = (),
) -> ReconciliationPlan:
    """Compute removals (``before - after``) and additions (``after - before``).

    Destinations are keyed by basename. When several sources map to the same
    destination the one whose ``.bin`` folder comes last in ``precedence``
    wins (ties broken by path); the other additions are returned as shadowed.
    Removals are not deduplicated: a second removal of the same destination
    finds nothing left to delete.
    Sources outside every listed folder rank below all of them.
    """

    to_remove = sorted(
        LinkChange(source=source, destination=destination_for(source, bin_dir))
        for source in before - after
    )
    to_add, shadowed = _by_destination(after - before, bin_dir=bin_dir, precedence=precedence)
    return ReconciliationPlan(
        to_remove=tuple(to_remove),
        to_add=tuple(to_add),
        shadowed=tuple(shadowed),
    )
