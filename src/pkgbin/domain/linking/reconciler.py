"""Keep global binary links in step with the packages installed globally.

One run per command:

1) snapshot the registry ``.bin`` folders
2) run the mutating install/remove step (failures propagate, nothing is linked)
3) snapshot again
4) diff the two snapshots into a :class:`ReconciliationPlan`
5) remove links of vanished binaries, if we own them
6) link new binaries, replacing stale links we own and never foreign files

Steps 3-6 run to completion once step 2 succeeded, even if the surrounding
task is cancelled; the cancellation is re-raised afterwards.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from .ownership import OwnershipVerifier
from .plan import plan_reconciliation
from .snapshot import BinarySnapshotter
from .types import LinkOutcome, ReconciliationReport

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence
    from pathlib import Path

    from pkgbin.domain.ports.filesystem import Filesystem
    from pkgbin.domain.ports.linking import Linker

    from .types import BinarySet, LinkChange, ReconciliationPlan, RegistryLocation

MutatingStep: TypeAlias = "Callable[[], Awaitable[None]]"

log = getLogger(__name__)


@dataclass(slots=True)
class BinaryLinkReconciler:
    fs: Filesystem
    linker: Linker
    snapshotter: BinarySnapshotter
    ownership: OwnershipVerifier

    @classmethod
    def from_ports(cls, *, fs: Filesystem, linker: Linker) -> BinaryLinkReconciler:
        return cls(
            fs=fs,
            linker=linker,
            snapshotter=BinarySnapshotter(fs=fs),
            ownership=OwnershipVerifier(fs=fs),
        )

    async def run(
        self,
        step: MutatingStep,
        *,
        registries: Sequence[RegistryLocation],
        bin_dir: Path,
        project_root: Path,
    ) -> ReconciliationReport:
        """Wrap ``step`` with before/after snapshots and apply the resulting plan."""

        before = await self.snapshotter.snapshot(registries)
        await step()

        completion = asyncio.ensure_future(
            self._complete(
                before,
                registries=registries,
                bin_dir=bin_dir,
                project_root=project_root,
            )
        )
        try:
            return await asyncio.shield(completion)
        except asyncio.CancelledError as cancelled:
            if completion.cancelled():
                raise
            log.warning("Cancellation requested; finishing binary link reconciliation first")
            while not completion.done():
                try:
                    await asyncio.wait({completion})
                except asyncio.CancelledError:
                    log.warning("Ignoring repeated cancellation until links are reconciled")
            if completion.cancelled():
                raise cancelled from None
            error = completion.exception()
            if error is not None:
                raise error from cancelled
            raise cancelled from None

    async def _complete(
        self,
        before: BinarySet,
        *,
        registries: Sequence[RegistryLocation],
        bin_dir: Path,
        project_root: Path,
    ) -> ReconciliationReport:
        after = await self.snapshotter.snapshot(registries)
        plan = plan_reconciliation(
            before,
            after,
            bin_dir=bin_dir,
            precedence=tuple(registry.bin_dir for registry in registries),
        )
        return await self.apply(plan, project_root=project_root)

    async def apply(self, plan: ReconciliationPlan, *, project_root: Path) -> ReconciliationReport:
        """Apply ``plan``; ownership is checked right before every deletion."""

        report = ReconciliationReport(plan=plan)
        if plan.is_empty:
            log.debug("Binary links already up to date")
            return report

        for change in plan.to_remove:
            await self._remove(change, project_root=project_root, report=report)
        for change in plan.shadowed:
            report.record(change, LinkOutcome.SHADOWED)
        for change in plan.to_add:
            await self._add(change, project_root=project_root, report=report)

        counts = report.counts()
        log.info(
            "Reconciled binary links: linked=%s, replaced=%s, removed=%s, conflicts=%s",
            counts[LinkOutcome.LINKED],
            counts[LinkOutcome.REPLACED],
            counts[LinkOutcome.REMOVED],
            len(report.conflicts),
        )
        return report

    async def _remove(
        self, change: LinkChange, *, project_root: Path, report: ReconciliationReport
    ) -> None:
        destination = change.destination
        if not await self.fs.exists(destination):
            report.record(change, LinkOutcome.SKIPPED_MISSING)
            return

        decision = await self.ownership.is_owned(project_root, destination)
        if not decision.owned:
            report.record(change, LinkOutcome.SKIPPED_NOT_OWNED, decision.real_path)
            return

        log.debug("Removing link %s (was %s)", destination, change.source)
        await self.fs.unlink(destination)
        report.record(change, LinkOutcome.REMOVED, decision.real_path)

    async def _add(
        self, change: LinkChange, *, project_root: Path, report: ReconciliationReport
    ) -> None:
        destination = change.destination
        outcome = LinkOutcome.LINKED
        if await self.fs.exists(destination):
            decision = await self.ownership.is_owned(project_root, destination)
            if not decision.owned:
                report.record(change, LinkOutcome.SKIPPED_NOT_OWNED, decision.real_path)
                return
            log.debug("Replacing stale link %s", destination)
            await self.fs.unlink(destination)
            outcome = LinkOutcome.REPLACED

        log.debug("Linking %s -> %s", destination, change.source)
        await self.linker.create_link(change.source, destination)
        report.record(change, outcome)


__all__ = ["BinaryLinkReconciler", "MutatingStep"]
