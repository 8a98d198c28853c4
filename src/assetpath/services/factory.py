"""Asset factory — turns raw asset paths into ordered, located assets.

One factory is created per build session. Every asset it makes carries the
absolute path, the public-root-relative identifier and the next bundle
order. Resolution never fails for missing or unrelated paths; only an
unusable public root is reported, once, at construction.
"""

from __future__ import annotations

import logging
import ntpath
import posixpath

from assetpath.core.errors import ConfigError
from assetpath.core.filesystem import Filesystem, LocalFilesystem
from assetpath.core.models import Asset, AssetSettings, ResolvedLocation
from assetpath.services.ordering import OrderAssigner
from assetpath.services.relative import RelativePathBuilder
from assetpath.services.resolver import PathResolver

logger = logging.getLogger(__name__)


class AssetFactory:
    """Resolve asset paths against a public root and assign bundle order."""

    def __init__(self, files: Filesystem, environment: str, public_root: str):
        self.files = files
        self.environment = environment
        self.public_root = _normalize_public_root(public_root)

        try:
            canonical_root = files.canonicalize(self.public_root)
        except OSError as exc:
            raise ConfigError(f"Public root is not reachable: {self.public_root}") from exc

        self.resolver = PathResolver(files, self.public_root)
        self.relative = RelativePathBuilder(canonical_root)
        self.orders = OrderAssigner()

    @classmethod
    def from_settings(cls, settings: AssetSettings, files: Filesystem | None = None) -> "AssetFactory":
        return cls(files or LocalFilesystem(), settings.environment, settings.public_root)

    def resolve(self, path: str | None) -> tuple[str | None, str | None, int]:
        """Return ``(absolute, relative, order)`` for *path*."""
        absolute = self.resolver.build_absolute_path(path)

        # Outside the public root there may still be a published copy,
        # which then replaces the absolute path.
        if absolute is not None and self.resolver.outside_public(absolute):
            absolute = self.resolver.find_published_path(path)

        relative = self.relative.build_relative_path(absolute)
        order = self.orders.next_order()
        logger.debug("Resolved %s -> %s (%s) order=%d", path, absolute, relative, order)
        return absolute, relative, order

    def make(self, path: str | None) -> Asset:
        absolute, relative, order = self.resolve(path)
        return Asset(
            location=ResolvedLocation(absolute_path=absolute, relative_path=relative),
            order=order,
            environment=self.environment,
        )


def _normalize_public_root(public_root: str) -> str:
    root = (public_root or "").strip()
    if not root:
        raise ConfigError("Public root is not configured")
    if len(root) > 1 and root.endswith(("/", "\\")):
        root = root[:-1]
    if not (posixpath.isabs(root) or ntpath.isabs(root)):
        raise ConfigError(f"Public root must be an absolute path: {public_root}")
    return root

