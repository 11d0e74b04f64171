from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from pkgbin.adapters.local_fs import LocalFilesystem, SymlinkLinker
from pkgbin.domain.linking import BinaryLinkReconciler, RegistryLocation

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


class SpyFilesystem(LocalFilesystem):
    """Local filesystem that records destructive calls."""

    def __init__(self) -> None:
        self.unlinked: list[Path] = []
        self.realpath_calls: list[Path] = []

    async def realpath(self, path: Path) -> Path:
        self.realpath_calls.append(path)
        return await super().realpath(path)

    async def unlink(self, path: Path) -> None:
        self.unlinked.append(path)
        await super().unlink(path)


class RecordingLinker(SymlinkLinker):
    def __init__(self) -> None:
        self.created: list[tuple[Path, Path]] = []

    async def create_link(self, source: Path, destination: Path) -> None:
        self.created.append((source, destination))
        await super().create_link(source, destination)


class RecordingReporter:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []
        self.lists: dict[str, list[str]] = {}

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def list(self, key: str, items: Sequence[str]) -> None:
        self.lists[key] = list(items)

    @property
    def warnings(self) -> list[str]:
        return [message for level, message in self.messages if level == "warn"]


def add_binary(registry: RegistryLocation, name: str) -> Path:
    """Create an executable under ``<registry>/<name>/cli.js`` and its ``.bin`` link."""

    package_dir = registry.root_path / name
    package_dir.mkdir(parents=True, exist_ok=True)
    target = package_dir / "cli.js"
    target.write_text("#!/usr/bin/env node\n")
    registry.bin_dir.mkdir(parents=True, exist_ok=True)
    source = registry.bin_dir / name
    os.symlink(target, source)
    return source


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = (tmp_path / "global").resolve()
    root.mkdir()
    return root


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = (tmp_path / "bin").resolve()
    path.mkdir()
    return path


@pytest.fixture
def registry(project_root: Path) -> RegistryLocation:
    return RegistryLocation(name="npm", root_path=project_root / "node_modules")


@pytest.fixture
def spy_fs() -> SpyFilesystem:
    return SpyFilesystem()


@pytest.fixture
def linker() -> RecordingLinker:
    return RecordingLinker()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def reconciler(spy_fs: SpyFilesystem, linker: RecordingLinker) -> BinaryLinkReconciler:
    return BinaryLinkReconciler.from_ports(fs=spy_fs, linker=linker)


@pytest.fixture
def make_binary() -> Callable[[RegistryLocation, str], Path]:
    return add_binary
