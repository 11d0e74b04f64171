"""Reporter rendering user-facing messages through ``logging``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

REPORTER_LOGGER_NAME = "pkgbin.reporter"


class LoggingReporter:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger(REPORTER_LOGGER_NAME)

    def info(self, message: str) -> None:
        self._log.info(message)

    def success(self, message: str) -> None:
        self._log.info("success %s", message)

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def list(self, key: str, items: Sequence[str]) -> None:
        for item in items:
            self._log.info("- %s", item, extra={"list_key": key})


__all__ = ["REPORTER_LOGGER_NAME", "LoggingReporter"]
