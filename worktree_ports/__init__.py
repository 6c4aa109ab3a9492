"""Deterministic per-worktree port assignment for parallel development."""

from __future__ import annotations

from .ports import compute_port
from .ports import djb2_hash
from .config import upsert_env_var

__all__ = ["compute_port", "djb2_hash", "upsert_env_var"]
__version__ = "0.1.0"
