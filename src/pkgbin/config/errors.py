"""Errors raised while reading ``PKGBIN_*`` settings from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(RuntimeError):
    """A ``PKGBIN_*`` setting could not be turned into a usable value.

    ``variable`` names the environment variable at fault, when there is one.
    """

    def __init__(self, message: str, *, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable


class MissingConfigurationError(ConfigurationError):
    def __init__(self, variable: str) -> None:
        super().__init__(f"Missing configuration for: {variable}", variable=variable)


class BinDirInsideGlobalFolderError(ConfigurationError):
    """Links in the bin dir would resolve into the global folder and look owned."""

    def __init__(self, bin_dir: Path, global_folder: Path) -> None:
        super().__init__(
            f"Binary directory {bin_dir} must not be inside the global folder {global_folder}",
            variable="PKGBIN_BIN_DIR",
        )
        self.bin_dir = bin_dir
        self.global_folder = global_folder
