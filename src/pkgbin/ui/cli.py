from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pkgbin.app import global_add, global_bin, global_ls, global_remove
from pkgbin.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage globally installed packages")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every planned link change",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    global_parser = subparsers.add_parser("global", help="Global package commands")
    global_sub = global_parser.add_subparsers(dest="global_command", required=True)

    add = global_sub.add_parser("add", help="Install packages globally and link their binaries")
    add.add_argument("patterns", nargs="+", help="Dependency patterns, e.g. name@range")

    remove = global_sub.add_parser("remove", help="Remove global packages and their binaries")
    remove.add_argument("patterns", nargs="+", help="Names of installed global packages")

    global_sub.add_parser("ls", help="List global packages and their binaries")
    global_sub.add_parser("bin", help="Print the directory global binaries are linked into")

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(verbose=parsed_args.verbose)

    try:
        command = parsed_args.global_command
        if command == "add":
            global_add(parsed_args.patterns)
        elif command == "remove":
            global_remove(parsed_args.patterns)
        elif command == "ls":
            global_ls()
        elif command == "bin":
            global_bin()
        else:
            raise ValueError(f"Unsupported command: {command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)
    except KeyboardInterrupt:
        log.info("Closed by user (Ctrl+C)")
        sys.exit(0)
    except Exception:
        log.exception("Global %s failed", parsed_args.global_command)
        sys.exit(1)


def run() -> None:
    """Console script entry point; loads ``.env`` before parsing arguments."""
    load_dotenv()
    main()


if __name__ == "__main__":
    run()
