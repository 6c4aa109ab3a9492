"""Command implementations for the worktree-ports CLI."""

from __future__ import annotations

import os
from pathlib import Path

from .config import ENV_FILENAME
from .config import PORT_KEY
from .config import ROOT_ENV_VAR
from .config import upsert_env_var
from .ports import compute_port
from .ports import worktree_name
from .utils import fail
from .utils import info
from .worktree import copy_source
from .worktree import list_linked_worktrees
from .worktree import resolve_source


def seed_env_file(source: dict, env_file: Path, env_filename: str, root_label: str):
    """Copy the resolved source over the local env file, aborting on failure."""
    src = Path(source["path"])
    if env_file.exists() and os.path.samefile(src, env_file):
        info(f"{env_filename} at {src} is already this worktree's, nothing to copy")
        return
    try:
        copy_source(src, env_file)
    except OSError:
        fail(f"failed to copy {env_filename} from {source['root']}")

    if source["origin"] == "root":
        info(f"Copied {env_filename} from root repo (via {root_label})")
    else:
        info(f"Copied {env_filename} from main worktree ({source['root']})")


def setup_worktree(
    cwd: str,
    env_filename: str = ENV_FILENAME,
    key: str = PORT_KEY,
    root_override: str | None = None,
    list_worktrees=list_linked_worktrees,
    root_label: str = ROOT_ENV_VAR,
) -> int | None:
    """Seed the worktree's env file and write its deterministic port into it.

    Returns the assigned port, or None when there is no env file to update.
    """
    env_file = Path(cwd) / env_filename

    source = resolve_source(
        cwd,
        env_filename=env_filename,
        root_override=root_override,
        list_worktrees=list_worktrees,
        root_label=root_label,
    )
    if source:
        seed_env_file(source, env_file, env_filename, root_label)

    if not env_file.is_file():
        info(f"No {env_filename} file found, skipping port assignment")
        return None

    name = worktree_name(cwd)
    port = compute_port(name)
    try:
        upsert_env_var(env_file, key, port)
    except (OSError, UnicodeDecodeError):
        fail(f"failed to update {key} in {env_file}")

    info(f"{key} set to {port} (from worktree: {name})")
    return port


def cmd_setup(args):
    """Entry point for `worktree-ports setup`, the default command."""
    root_label = "--root" if getattr(args, "root_from_flag", False) else ROOT_ENV_VAR
    setup_worktree(
        os.getcwd(),
        env_filename=args.env_file,
        key=args.key,
        root_override=args.root,
        root_label=root_label,
    )


def cmd_port(args):
    """Print the port a worktree name maps to, without touching any file."""
    name = args.name if args.name is not None else worktree_name(os.getcwd())
    print(compute_port(name))
