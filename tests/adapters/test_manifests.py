from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from pkgbin.adapters.manifests import ManifestPackageReader, PackageManifest, load_manifest
from pkgbin.domain.linking import RegistryLocation
from pkgbin.domain.ports.packages import InstalledPackage

if TYPE_CHECKING:
    from pathlib import Path


def _write_manifest(package_dir: Path, payload: object) -> None:
    package_dir.mkdir(parents=True)
    (package_dir / "package.json").write_text(json.dumps(payload))


def test_string_bin_uses_unscoped_package_name() -> None:
    manifest = PackageManifest.model_validate(
        {"name": "@scope/tool", "version": "1.2.3", "bin": "./cli.js"}
    )

    assert manifest.bin == {"tool": "./cli.js"}


def test_mapping_bin_is_kept_and_sorted() -> None:
    manifest = PackageManifest.model_validate(
        {"name": "multi", "version": "1.0.0", "bin": {"zeta": "z.js", "alpha": "a.js"}}
    )

    assert manifest.bin_names == ("alpha", "zeta")


def test_missing_or_null_bin_means_no_binaries() -> None:
    assert PackageManifest.model_validate({"name": "a"}).bin == {}
    assert PackageManifest.model_validate({"name": "a", "bin": None}).bin == {}


def test_blank_name_is_rejected() -> None:
    with pytest.raises(ValidationError):
        PackageManifest.model_validate({"name": "  "})


def test_load_manifest_ignores_invalid_json(tmp_path: Path) -> None:
    package_dir = tmp_path / "broken"
    package_dir.mkdir()
    (package_dir / "package.json").write_text("{not json")

    assert load_manifest(package_dir) is None


def test_reader_lists_plain_and_scoped_packages(tmp_path: Path) -> None:
    root = tmp_path / "node_modules"
    _write_manifest(root / "eslint", {"name": "eslint", "version": "9.0.0", "bin": "bin/eslint.js"})
    _write_manifest(root / "@babel" / "cli", {"name": "@babel/cli", "version": "7.0.0"})
    (root / ".bin").mkdir()
    (root / "no-manifest").mkdir()

    packages = asyncio.run(ManifestPackageReader()([RegistryLocation(name="npm", root_path=root)]))

    assert packages == [
        InstalledPackage(name="@babel/cli", version="7.0.0", bins=()),
        InstalledPackage(name="eslint", version="9.0.0", bins=("eslint",)),
    ]


def test_reader_skips_missing_registry_and_keeps_first_duplicate(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    _write_manifest(first / "tool", {"name": "tool", "version": "1.0.0"})
    _write_manifest(second / "tool", {"name": "tool", "version": "2.0.0"})

    packages = asyncio.run(
        ManifestPackageReader()(
            [
                RegistryLocation(name="missing", root_path=tmp_path / "missing"),
                RegistryLocation(name="npm", root_path=first),
                RegistryLocation(name="yarn", root_path=second),
            ]
        )
    )

    assert packages == [InstalledPackage(name="tool", version="1.0.0")]
