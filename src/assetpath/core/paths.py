"""Path constants and root-resolution logic."""

from __future__ import annotations

from pathlib import Path

ASSETPATH_TOML = "assetpath.toml"


def resolve_root(start: Path | None = None) -> Path:
    """Walk up from *start* to locate an existing assetpath.toml, else return *start*."""
    start = start or Path.cwd()
    for parent in [start, *start.parents]:
        if (parent / ASSETPATH_TOML).exists():
            return parent
    return start


def config_path(root: Path) -> Path:
    return root / ASSETPATH_TOML
