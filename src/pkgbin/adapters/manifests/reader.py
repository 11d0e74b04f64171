"""Read manifests of the packages installed in each registry folder."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from pkgbin.domain.ports.packages import InstalledPackage

from .schema import PackageManifest

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from pkgbin.domain.linking.types import RegistryLocation

MANIFEST_FILENAME: Final[str] = "package.json"

log = getLogger(__name__)


def _package_dirs(root: Path) -> Iterator[Path]:
    for entry in sorted(root.iterdir()):
        if entry.name.startswith(".") or not entry.is_dir():
            continue
        if entry.name.startswith("@"):
            yield from (child for child in sorted(entry.iterdir()) if child.is_dir())
        else:
            yield entry


def load_manifest(package_dir: Path) -> PackageManifest | None:
    manifest_path = package_dir / MANIFEST_FILENAME
    if not manifest_path.is_file():
        return None
    try:
        return PackageManifest.model_validate_json(manifest_path.read_bytes())
    except ValidationError as exc:
        log.warning("Ignoring invalid manifest %s: %s", manifest_path, exc.errors()[0]["msg"])
        return None


def read_installed_packages(registries: Sequence[RegistryLocation]) -> list[InstalledPackage]:
    """Return installed packages; the first registry providing a name wins."""

    packages: dict[str, InstalledPackage] = {}
    for registry in registries:
        if not registry.root_path.is_dir():
            continue
        for package_dir in _package_dirs(registry.root_path):
            manifest = load_manifest(package_dir)
            if manifest is None or manifest.name in packages:
                continue
            packages[manifest.name] = InstalledPackage(
                name=manifest.name,
                version=manifest.version,
                bins=manifest.bin_names,
            )
    return list(packages.values())


class ManifestPackageReader:
    async def __call__(self, registries: Sequence[RegistryLocation]) -> list[InstalledPackage]:
        return await asyncio.to_thread(read_installed_packages, registries)


__all__ = ["MANIFEST_FILENAME", "ManifestPackageReader", "load_manifest", "read_installed_packages"]
