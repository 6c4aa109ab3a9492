"""Deterministic worktree-name to port mapping."""

from __future__ import annotations

from pathlib import Path


PORT_BASE = 4000
PORT_SPAN = 1000

HASH_SEED = 5381
HASH_MULTIPLIER = 33
HASH_MODULUS = 2147483647


def djb2_hash(value: str) -> int:
    """Compute a djb2 hash of value, reduced modulo 2**31 - 1 at every step.

    Characters are taken as Unicode code points, so ``"é"`` contributes 233
    rather than its two UTF-8 bytes. Existing deployments seeded from the
    shell version of this tool under a UTF-8 locale hash the same way.
    """
    h = HASH_SEED
    for ch in value:
        h = (h * HASH_MULTIPLIER + ord(ch)) % HASH_MODULUS
    return h


def compute_port(name: str) -> int:
    """Map a worktree name to a stable port in [PORT_BASE, PORT_BASE + PORT_SPAN)."""
    return djb2_hash(name) % PORT_SPAN + PORT_BASE


def worktree_name(path) -> str:
    """Return the identifying name of a worktree: the base name of its path."""
    return Path(path).name
