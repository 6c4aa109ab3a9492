"""Pytest fixtures shared across the worktree-ports tests."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

import worktree_ports.worktree as worktree_module


@pytest.fixture
def no_git(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the git-backed worktree lister behave as if git were not installed."""
    monkeypatch.setattr(worktree_module, "has_bin", lambda _name: False)


@pytest.fixture
def fake_worktrees():
    """Build a list_worktrees stand-in returning fixed paths, primary first."""

    def _make(*paths):
        calls = []

        def _list(cwd):
            calls.append(cwd)
            return [str(p) for p in paths]

        _list.calls = calls
        return _list

    return _make


def _git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", "-c", "user.name=test", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        check=True,
        text=True,
        capture_output=True,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path):
    """Create a main checkout plus a linked worktree named ``tokyo``."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    main = tmp_path / "main"
    main.mkdir()
    _git("init", "-q", cwd=main)
    _git("commit", "-q", "--allow-empty", "-m", "init", cwd=main)
    linked = tmp_path / "tokyo"
    _git("worktree", "add", "-q", "-b", "tokyo", str(linked), cwd=main)
    return main, linked
