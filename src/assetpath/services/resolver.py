"""Absolute path resolution and the published-path search."""

from __future__ import annotations

import logging

from assetpath.core.filesystem import Filesystem

logger = logging.getLogger(__name__)


class PathResolver:
    """Canonicalizes raw asset paths relative to a public root."""

    def __init__(self, files: Filesystem, public_root: str):
        self.files = files
        self.public_root = public_root

    def build_absolute_path(self, path: str | None) -> str | None:
        """Return the canonical path, or *path* unchanged when it cannot be resolved."""
        if path is None:
            return None
        try:
            return self.files.canonicalize(path)
        except OSError as exc:
            logger.debug("Keeping unresolved asset path %s: %s", path, exc)
            return path

    def outside_public(self, absolute_path: str) -> bool:
        return not absolute_path.startswith(self.public_root)

    def find_published_path(self, path: str) -> str:
        """Search the public root for a published copy of *path*.

        Leading segments are dropped one at a time, so a vendor asset at
        ``vendor/pkg/dist/app.js`` is looked for as ``<root>/vendor/pkg/dist/app.js``,
        then ``<root>/pkg/dist/app.js``, ``<root>/dist/app.js`` and ``<root>/app.js``.
        The first candidate that exists wins; otherwise *path* is returned.
        """
        segments = [s for s in self._strip_public_root(path).split("/") if s]

        for i in range(len(segments)):
            candidate = self.public_root + "/" + "/".join(segments[i:])
            if self.files.exists(candidate):
                logger.debug("Found published path %s for %s", candidate, path)
                return candidate

        logger.debug("No published path found for %s", path)
        return path

    def _strip_public_root(self, path: str) -> str:
        if path.startswith(self.public_root):
            path = path[len(self.public_root) :]
        return path.replace("\\", "/").replace("..", "")
