"""Global install location configuration.

Global commands run against a dedicated project folder (the *global folder*).
Packages installed there expose executables through the ``.bin`` directory of
each registry folder, and those executables are linked into the *bin dir*,
which is expected to be on the user's ``PATH``.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from pkgbin.domain.linking.ownership import is_within
from pkgbin.domain.linking.types import RegistryLocation

from .errors import BinDirInsideGlobalFolderError, ConfigurationError, MissingConfigurationError

APP_DIR_NAME: Final[str] = "pkgbin"
GLOBAL_DIR_NAME: Final[str] = "global"
BIN_DIR_NAME: Final[str] = "bin"
DEFAULT_REGISTRIES: Final[str] = "npm=node_modules"
DEFAULT_INSTALL_COMMAND: Final[tuple[str, ...]] = ("npm", "install")
DEFAULT_REMOVE_COMMAND: Final[tuple[str, ...]] = ("npm", "uninstall")


@dataclass(frozen=True, slots=True)
class GlobalConfig:
    """Resolved configuration for one global command invocation."""

    global_folder: Path
    bin_dir: Path
    registries: tuple[RegistryLocation, ...]
    install_command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND
    remove_command: tuple[str, ...] = DEFAULT_REMOVE_COMMAND

    @property
    def cwd(self) -> Path:
        """Project root used for global operations and ownership checks."""

        return self.global_folder


def _default_data_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else (Path.home() / ".local" / "share")
    return base_path / APP_DIR_NAME


def _resolve(path: Path) -> Path:
    return path.expanduser().resolve()


def default_global_folder() -> Path:
    env_dir = os.getenv("PKGBIN_GLOBAL_FOLDER")
    if env_dir and env_dir.strip():
        return _resolve(Path(env_dir))
    return _resolve(_default_data_dir() / GLOBAL_DIR_NAME)


def default_bin_dir() -> Path:
    env_dir = os.getenv("PKGBIN_BIN_DIR")
    if env_dir and env_dir.strip():
        return _resolve(Path(env_dir))
    if os.name == "nt":
        return _resolve(_default_data_dir() / BIN_DIR_NAME)
    return _resolve(Path.home() / ".local" / "bin")


def parse_registries(value: str, *, global_folder: Path) -> tuple[RegistryLocation, ...]:
    """Parse ``name=folder`` pairs into registry locations, keeping their order."""

    registries: list[RegistryLocation] = []
    seen: set[str] = set()
    for raw_entry in value.split(","):
        entry = raw_entry.strip()
        if not entry:
            continue
        name, sep, folder = entry.partition("=")
        name = name.strip()
        folder = folder.strip()
        if not sep or not name or not folder:
            raise ConfigurationError(f"Invalid registry entry {entry!r}, expected name=folder")
        if name in seen:
            raise ConfigurationError(f"Duplicate registry name {name!r}")
        seen.add(name)
        folder_path = Path(folder).expanduser()
        if not folder_path.is_absolute():
            folder_path = global_folder / folder_path
        registries.append(RegistryLocation(name=name, root_path=_resolve(folder_path)))

    if not registries:
        raise MissingConfigurationError("PKGBIN_REGISTRIES")
    return tuple(registries)


def _command_from_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return tuple(shlex.split(value))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid command in {name}: {exc}", variable=name) from exc


def get_global_config() -> GlobalConfig:
    """Build the global configuration from the process environment."""

    global_folder = default_global_folder()
    bin_dir = default_bin_dir()
    if is_within(bin_dir, global_folder):
        # links placed inside the global folder always pass the ownership check
        raise BinDirInsideGlobalFolderError(bin_dir, global_folder)
    registries = parse_registries(
        os.getenv("PKGBIN_REGISTRIES") or DEFAULT_REGISTRIES,
        global_folder=global_folder,
    )
    return GlobalConfig(
        global_folder=global_folder,
        bin_dir=bin_dir,
        registries=registries,
        install_command=_command_from_env("PKGBIN_INSTALL_COMMAND", DEFAULT_INSTALL_COMMAND),
        remove_command=_command_from_env("PKGBIN_REMOVE_COMMAND", DEFAULT_REMOVE_COMMAND),
    )
