"""Root-relative identifiers for resolved assets."""

from __future__ import annotations

import hashlib
import logging
import posixpath

from assetpath.core.remote import is_remote

logger = logging.getLogger(__name__)


def hashed_identifier(path: str) -> str:
    """Synthesize ``<md5 of directory>/<basename>`` for an asset outside the root.

    Pure and deterministic: the same path always yields the same identifier.
    """
    normalized = path.replace("\\", "/")
    if len(normalized) > 1:
        normalized = normalized.rstrip("/") or "/"
    directory = posixpath.dirname(normalized) or "."
    basename = posixpath.basename(normalized)
    digest = hashlib.md5(directory.encode("utf-8")).hexdigest()
    if not basename:
        return digest
    return f"{digest}/{basename}"


class RelativePathBuilder:
    """Derives public-root-relative identifiers from absolute paths."""

    def __init__(self, canonical_public_root: str):
        self.canonical_public_root = canonical_public_root

    def build_relative_path(self, path: str | None) -> str | None:
        if path is None:
            return None

        relative = path
        if relative.startswith(self.canonical_public_root):
            relative = relative[len(self.canonical_public_root) :]
        relative = relative.replace("\\", "/")

        if is_remote(path):
            return relative

        relative = relative.strip("/")

        # Nothing was stripped, so the asset lives outside the public root.
        if path.replace("\\", "/").strip("/") == relative:
            identifier = hashed_identifier(path)
            logger.debug("Asset %s is outside the public root, using %s", path, identifier)
            return identifier

        return relative
