"""CLI parser wiring for worktree-ports."""

from __future__ import annotations

import argparse
import os

from .commands import cmd_port
from .commands import cmd_setup
from .config import ENV_FILENAME
from .config import PORT_KEY
from .config import ROOT_ENV_VAR


def _add_setup_options(parser: argparse.ArgumentParser, defaults: bool = True):
    # Subcommand copies leave the top-level values alone unless given.
    parser.add_argument(
        "--env-file",
        default=ENV_FILENAME if defaults else argparse.SUPPRESS,
        help=f"Env file name to seed and update (default: {ENV_FILENAME})",
    )
    parser.add_argument(
        "--key",
        default=PORT_KEY if defaults else argparse.SUPPRESS,
        help=f"Key to write the port under (default: {PORT_KEY})",
    )
    parser.add_argument(
        "--root",
        default=None if defaults else argparse.SUPPRESS,
        help=f"Directory to copy the env file from first (default: ${ROOT_ENV_VAR})",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argparse parser; with no subcommand it runs setup."""
    parser = argparse.ArgumentParser(
        prog="worktree-ports",
        description="Deterministic per-worktree port assignment for parallel development tools.",
    )
    _add_setup_options(parser)
    parser.set_defaults(func=cmd_setup)
    sub = parser.add_subparsers(dest="cmd")

    p_setup = sub.add_parser(
        "setup",
        help="Copy the env file from the main worktree and write the port into it",
    )
    _add_setup_options(p_setup, defaults=False)
    p_setup.set_defaults(func=cmd_setup)

    p_port = sub.add_parser("port", help="Print the port for a worktree name without writing anything")
    p_port.add_argument("name", nargs="?", help="Worktree name (default: current directory name)")
    p_port.set_defaults(func=cmd_port)

    return parser


def main(argv: list[str] | None = None):
    """CLI entrypoint invoked by console script or module run."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.func is cmd_setup:
        args.root_from_flag = bool(args.root)
        if not args.root:
            args.root = os.environ.get(ROOT_ENV_VAR) or None

    args.func(args)
