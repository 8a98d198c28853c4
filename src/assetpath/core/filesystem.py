"""Filesystem capability used during path resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    """The two filesystem questions path resolution needs answered."""

    def exists(self, path: str) -> bool: ...

    def canonicalize(self, path: str) -> str:
        """Return the absolute real path, raising ``OSError`` if unreachable."""
        ...


class LocalFilesystem:
    """Filesystem backed by the real disk."""

    def exists(self, path: str) -> bool:
        try:
            return Path(path).exists()
        except OSError:
            return False

    def canonicalize(self, path: str) -> str:
        try:
            return str(Path(path).resolve(strict=True))
        except RuntimeError as exc:
            # Symlink loops raise RuntimeError on older interpreters.
            raise OSError(f"Cannot canonicalize {path}: {exc}") from exc
