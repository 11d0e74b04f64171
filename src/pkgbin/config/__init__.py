"""Application configuration helpers."""

from __future__ import annotations

from .errors import BinDirInsideGlobalFolderError, ConfigurationError, MissingConfigurationError
from .global_folder import GlobalConfig, get_global_config, parse_registries
from .logging import configure_logging

__all__ = [
    "BinDirInsideGlobalFolderError",
    "ConfigurationError",
    "GlobalConfig",
    "MissingConfigurationError",
    "configure_logging",
    "get_global_config",
    "parse_registries",
]
