"""Data shapes for resolved assets and their settings."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from assetpath.core.remote import is_remote

STYLESHEET_EXTENSIONS = frozenset({"css", "sass", "scss", "less", "styl", "stylus"})
JAVASCRIPT_EXTENSIONS = frozenset({"js", "coffee", "ts", "mjs"})


# ── Resolution layer ────────────────────────────────────────────────


@dataclass(frozen=True)
class ResolvedLocation:
    """Absolute path and root-relative identifier of one asset.

    Both fields are ``None`` together, which only happens for a ``None`` input.
    """

    absolute_path: str | None
    relative_path: str | None


@dataclass(frozen=True)
class Asset:
    """An asset tagged with its location and bundle order at creation."""

    location: ResolvedLocation
    order: int
    environment: str

    @property
    def absolute_path(self) -> str | None:
        return self.location.absolute_path

    @property
    def relative_path(self) -> str | None:
        return self.location.relative_path

    @property
    def is_remote(self) -> bool:
        return self.absolute_path is not None and is_remote(self.absolute_path)

    @property
    def extension(self) -> str:
        """Lower-cased extension of the relative path, without the dot."""
        if not self.relative_path:
            return ""
        _, ext = posixpath.splitext(self.relative_path.split("?", 1)[0])
        return ext[1:].lower()

    @property
    def group(self) -> str | None:
        """``stylesheets`` or ``javascripts`` based on the extension."""
        if self.extension in STYLESHEET_EXTENSIONS:
            return "stylesheets"
        if self.extension in JAVASCRIPT_EXTENSIONS:
            return "javascripts"
        return None


# ── Settings layer ──────────────────────────────────────────────────


@dataclass
class AssetSettings:
    """Mirrors the [assets] table in assetpath.toml."""

    public_root: str
    environment: str = "production"
