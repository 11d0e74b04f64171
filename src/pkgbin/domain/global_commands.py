"""Global ``add``/``remove``/``ls``/``bin`` commands.

``add`` and ``remove`` wrap the external package manager step with binary
link reconciliation; ``ls`` and ``bin`` only read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from pkgbin.domain.linking.types import LinkOutcome
from pkgbin.domain.resolution import ExoticPatternDispatcher, normalize_pattern

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from pkgbin.domain.linking.reconciler import BinaryLinkReconciler
    from pkgbin.domain.linking.types import ReconciliationReport, RegistryLocation
    from pkgbin.domain.ports.packages import InstalledPackage, InstalledPackages, MutatingOperation
    from pkgbin.domain.ports.reporting import Reporter

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalLayout:
    """Where global packages live and where their binaries are linked."""

    project_root: Path
    bin_dir: Path
    registries: tuple[RegistryLocation, ...]


@dataclass(slots=True)
class GlobalCommandOrchestrator:
    layout: GlobalLayout
    reconciler: BinaryLinkReconciler
    install: MutatingOperation
    remove_packages: MutatingOperation
    installed: InstalledPackages
    reporter: Reporter
    dispatcher: ExoticPatternDispatcher = field(default_factory=ExoticPatternDispatcher)

    async def add(self, patterns: Sequence[str]) -> ReconciliationReport:
        if not patterns:
            raise ValueError("Missing package patterns to add")
        for pattern in patterns:
            claim = self.dispatcher.classify_dependency(pattern)
            if claim.claimed:
                log.debug("Pattern %s is resolved by the %s strategy", pattern, claim.strategy_id)

        report = await self._reconcile_around(self.install, patterns)
        await self._summarize_added(patterns)
        return report

    async def remove(self, patterns: Sequence[str]) -> ReconciliationReport:
        if not patterns:
            raise ValueError("Missing package names to remove")
        return await self._reconcile_around(self.remove_packages, patterns)

    async def ls(self) -> list[InstalledPackage]:
        packages = sorted(await self.installed(self.layout.registries), key=lambda pkg: pkg.name)
        for package in packages:
            self._render_package(package, saved=False)
        return packages

    def bin(self) -> Path:
        self.reporter.info(str(self.layout.bin_dir))
        return self.layout.bin_dir

    async def _reconcile_around(
        self, operation: MutatingOperation, patterns: Sequence[str]
    ) -> ReconciliationReport:
        report = await self.reconciler.run(
            partial(operation, tuple(patterns)),
            registries=self.layout.registries,
            bin_dir=self.layout.bin_dir,
            project_root=self.layout.project_root,
        )
        self.render_conflicts(report)
        return report

    def render_conflicts(self, report: ReconciliationReport) -> None:
        removals = set(report.plan.to_remove)
        for result in report.conflicts:
            change = result.change
            if result.outcome is LinkOutcome.SHADOWED:
                self.reporter.warn(
                    f"Binary {change.source} is shadowed by another binary linked at "
                    f"{change.destination}"
                )
            elif change in removals:
                self.reporter.warn(
                    f"Refusing to delete binary at {change.destination} as it doesn't appear "
                    "to be owned by us."
                )
            else:
                self.reporter.warn(
                    f"Cannot add binary {change.source} as there already exists one at "
                    f"{change.destination}"
                )

    async def _summarize_added(self, patterns: Sequence[str]) -> None:
        by_name = {package.name: package for package in await self.installed(self.layout.registries)}
        for pattern in patterns:
            if self.dispatcher.classify_dependency(pattern).claimed:
                continue
            name = normalize_pattern(pattern).name
            package = by_name.get(name)
            if package is None:
                log.debug("Installed package %s not found in any registry", name)
                continue
            self._render_package(package, saved=True)

    def _render_package(self, package: InstalledPackage, *, saved: bool) -> None:
        if package.bins:
            if saved:
                self.reporter.success(f"Installed {package.human} with binaries:")
            else:
                self.reporter.info(f"{package.human} has binaries:")
            self.reporter.list(f"bins-{package.name}", package.bins)
        elif saved:
            self.reporter.warn(f"{package.human} has no binaries")


__all__ = ["GlobalCommandOrchestrator", "GlobalLayout"]
