"""Public interface for the package manifest adapter."""

from __future__ import annotations

from .reader import ManifestPackageReader, load_manifest, read_installed_packages
from .schema import PackageManifest

__all__ = [
    "ManifestPackageReader",
    "PackageManifest",
    "load_manifest",
    "read_installed_packages",
]
