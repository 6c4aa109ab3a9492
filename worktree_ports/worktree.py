"""Locating the env file that seeds a new worktree."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from .config import ENV_FILENAME
from .config import ROOT_ENV_VAR
from .utils import has_bin
from .utils import info
from .utils import run
from .utils import warn


def parse_worktrees(output: str) -> list[str]:
    """Return the worktree paths from `git worktree list --porcelain`, primary first."""
    prefix = "worktree "
    return [ln[len(prefix):] for ln in output.split("\n") if ln.startswith(prefix)]


def list_linked_worktrees(cwd: str) -> list[str]:
    """Return the paths of the repository's worktrees as git orders them.

    Outside a repository, or without git on PATH, there is nothing to list.
    """
    if not has_bin("git"):
        return []
    try:
        run(["git", "rev-parse", "--git-dir"], cwd=cwd)
    except subprocess.CalledProcessError:
        return []

    try:
        output = run(["git", "worktree", "list", "--porcelain"], cwd=cwd)
    except subprocess.CalledProcessError:
        warn("'git worktree list' failed")
        return []
    return parse_worktrees(output)


def _same_dir(a, b) -> bool:
    return Path(a).resolve() == Path(b).resolve()


def resolve_source(
    cwd: str,
    env_filename: str = ENV_FILENAME,
    root_override: str | None = None,
    list_worktrees=list_linked_worktrees,
    root_label: str = ROOT_ENV_VAR,
):
    """Find the env file to seed this worktree from, first hit wins.

    Checks the root override directory, then the main worktree reported by
    ``list_worktrees(cwd)``. Returns ``{"path", "origin", "root"}`` or None.
    """
    if root_override:
        candidate = Path(root_override) / env_filename
        if candidate.is_file():
            return {"path": str(candidate), "origin": "root", "root": root_override}
        warn(f"{root_label} is set but no {env_filename} found at {candidate}")

    worktrees = list_worktrees(cwd)
    main_worktree = worktrees[0] if worktrees else ""
    if main_worktree and Path(main_worktree).is_dir() and not _same_dir(main_worktree, cwd):
        candidate = Path(main_worktree) / env_filename
        if candidate.is_file():
            return {"path": str(candidate), "origin": "main-worktree", "root": main_worktree}

    info(f"No source {env_filename} found (checked {root_label} and main worktree)")
    return None


def copy_source(source, dest):
    """Copy the source env file over dest, byte for byte."""
    shutil.copyfile(source, dest)
