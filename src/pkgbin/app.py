"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from pkgbin.adapters.local_fs import LocalFilesystem, SymlinkLinker
from pkgbin.adapters.manifests import ManifestPackageReader
from pkgbin.adapters.package_manager import SubprocessPackageOperation
from pkgbin.adapters.reporting import LoggingReporter
from pkgbin.config import GlobalConfig, get_global_config
from pkgbin.domain.global_commands import GlobalCommandOrchestrator, GlobalLayout
from pkgbin.domain.linking.reconciler import BinaryLinkReconciler

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from pkgbin.domain.linking.types import ReconciliationReport
    from pkgbin.domain.ports.packages import InstalledPackage
    from pkgbin.domain.ports.reporting import Reporter

log = getLogger(__name__)


def build_orchestrator(
    config: GlobalConfig | None = None,
    *,
    reporter: Reporter | None = None,
) -> GlobalCommandOrchestrator:
    """Wire the local adapters for the configured global folder."""

    effective_config = config or get_global_config()
    fs = LocalFilesystem()
    return GlobalCommandOrchestrator(
        layout=GlobalLayout(
            project_root=effective_config.cwd,
            bin_dir=effective_config.bin_dir,
            registries=effective_config.registries,
        ),
        reconciler=BinaryLinkReconciler.from_ports(fs=fs, linker=SymlinkLinker()),
        install=SubprocessPackageOperation(
            command=effective_config.install_command,
            cwd=effective_config.cwd,
        ),
        remove_packages=SubprocessPackageOperation(
            command=effective_config.remove_command,
            cwd=effective_config.cwd,
        ),
        installed=ManifestPackageReader(),
        reporter=reporter or LoggingReporter(),
    )


def global_add(
    patterns: Sequence[str],
    *,
    orchestrator: GlobalCommandOrchestrator | None = None,
) -> ReconciliationReport:
    """Install ``patterns`` globally and link their binaries."""

    effective = orchestrator or build_orchestrator()
    log.info("Adding global packages: %s", ", ".join(patterns))
    return asyncio.run(effective.add(patterns))


def global_remove(
    patterns: Sequence[str],
    *,
    orchestrator: GlobalCommandOrchestrator | None = None,
) -> ReconciliationReport:
    """Remove global packages and unlink the binaries they exposed."""

    effective = orchestrator or build_orchestrator()
    log.info("Removing global packages: %s", ", ".join(patterns))
    return asyncio.run(effective.remove(patterns))


def global_ls(*, orchestrator: GlobalCommandOrchestrator | None = None) -> list[InstalledPackage]:
    effective = orchestrator or build_orchestrator()
    return asyncio.run(effective.ls())


def global_bin(*, orchestrator: GlobalCommandOrchestrator | None = None) -> Path:
    effective = orchestrator or build_orchestrator()
    return effective.bin()
