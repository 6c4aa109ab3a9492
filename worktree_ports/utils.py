"""Shared utility helpers for worktree-ports."""

from __future__ import annotations

import shutil
import subprocess
import sys


PREFIX = "[worktree-ports]"


def run(cmd, cwd=None, check=True, capture=True):
    """Run a command (list form). Returns stdout when capture=True."""
    result = subprocess.run(
        cmd,
        cwd=cwd,
        check=check,
        text=True,
        capture_output=capture,
    )
    if capture:
        return result.stdout.strip()
    return ""


def has_bin(bin_name) -> bool:
    """Return True when the given executable is on PATH."""
    return shutil.which(bin_name) is not None


def info(message: str):
    print(f"{PREFIX} {message}")


def warn(message: str):
    print(f"{PREFIX} Warning: {message}", file=sys.stderr)


def fail(message: str):
    """Abort the run with a prefixed error message and exit status 1."""
    raise SystemExit(f"{PREFIX} Error: {message}")
