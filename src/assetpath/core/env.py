"""Runtime environment helpers.

User-level env files may carry the public root and environment tag so that
``assetpath resolve`` works outside a configured project. Values already set
in the process environment always win.
"""

from __future__ import annotations

import os
from pathlib import Path

PUBLIC_ROOT_VAR = "ASSETPATH_PUBLIC_ROOT"
ENVIRONMENT_VAR = "ASSETPATH_ENV"

_USER_ENV_LOADED = False


def load_user_env() -> None:
    """Load user-level env files once, without overriding existing vars."""
    global _USER_ENV_LOADED
    if _USER_ENV_LOADED:
        return

    for env_file in _candidate_env_files():
        for key, value in read_env_file(env_file).items():
            os.environ.setdefault(key, value)

    _USER_ENV_LOADED = True


def read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines; a missing file yields an empty mapping."""
    if not path.is_file():
        return {}

    values: dict[str, str] = {}
    for raw_line in path.read_text().splitlines():
        parsed = _parse_line(raw_line)
        if parsed is not None:
            key, value = parsed
            values.setdefault(key, value)
    return values


def _candidate_env_files() -> list[Path]:
    files: list[Path] = []
    explicit = os.environ.get("ASSETPATH_ENV_FILE", "").strip()
    if explicit:
        files.append(Path(explicit).expanduser())

    home_dir = os.environ.get("ASSETPATH_HOME", "").strip()
    if home_dir:
        files.append(Path(home_dir).expanduser() / ".env")

    files.append(Path.home() / ".config" / "assetpath" / "env")
    return files


def _parse_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if not line or line.startswith("#"):
        return None
    line = line.removeprefix("export ").strip()
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None

    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    return key, value
