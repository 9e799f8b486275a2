"""Command-line interface for smallsh."""

import argparse
import logging
import os
import sys

from smallsh import __version__
from smallsh.config import load_config
from smallsh.models import SignalPolicy
from smallsh.shell import Shell

log = logging.getLogger("smallsh")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smallsh",
        description="A small interactive shell with redirection and background jobs",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Read configuration from PATH instead of ~/.smallsh/config.json",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load configuration and run the shell until it exits."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if not hasattr(os, "fork"):
        print("Error: smallsh requires a POSIX environment", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    policy = SignalPolicy()
    policy.install_shell_disposition()
    log.debug("starting shell pid=%d", os.getpid())
    return Shell(config=config, policy=policy).run()


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
