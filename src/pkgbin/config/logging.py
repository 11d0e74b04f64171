"""Root logger setup for the ``pkgbin`` command line."""

from __future__ import annotations

import logging
from typing import Final

CLI_FORMAT: Final[str] = "%(levelname)s %(message)s"
VERBOSE_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> int:
    """Configure the root logger and return the level it was set to.

    Plain runs log at INFO with a short format; ``verbose`` switches to DEBUG
    and adds timestamps and logger names so each planned link change can be
    traced to its module.
    """

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=VERBOSE_FORMAT if verbose else CLI_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    return level
