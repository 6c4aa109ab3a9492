"""Helpers for the flat KEY=VALUE env file each worktree carries."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


ENV_FILENAME = ".env"
PORT_KEY = "APP_PORT"
ROOT_ENV_VAR = "CONDUCTOR_ROOT_PATH"


def read_env_lines(env_file: Path) -> list[str]:
    """Read the env file into a list of lines without line terminators.

    Only ``\\n`` and ``\\r\\n`` end a line; other Unicode line breaks stay
    inside values.
    """
    with open(env_file, encoding="utf-8", newline="") as fh:
        lines = fh.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def upsert_line(lines: list[str], key: str, value) -> list[str]:
    """Return lines with exactly one ``key=value`` entry.

    The first ``key=`` line is rewritten in place and any later ones are
    dropped. When no line matches, the entry is appended at the end.
    """
    prefix = f"{key}="
    entry = f"{key}={value}"
    out = []
    found = False
    for raw in lines:
        if raw.startswith(prefix):
            if not found:
                out.append(entry)
                found = True
            continue
        out.append(raw)
    if not found:
        out.append(entry)
    return out


def write_env_lines(env_file: Path, lines: list[str]):
    """Replace env_file with lines, never leaving a truncated file behind.

    The new content goes to a sibling temporary file which is then renamed
    over the target, so readers see either the old or the new file.
    """
    env_file = Path(env_file)
    content = "".join(f"{line}\n" for line in lines)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{env_file.name}.", suffix=".tmp", dir=env_file.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        if env_file.exists():
            shutil.copymode(env_file, tmp_name)
        os.replace(tmp_name, env_file)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def upsert_env_var(env_file: Path, key: str, value):
    """Idempotently write key=value into env_file (update if present, append if not)."""
    lines = read_env_lines(env_file)
    write_env_lines(env_file, upsert_line(lines, key, value))
