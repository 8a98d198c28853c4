"""Detection of remote (protocol-relative or URL) asset paths."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
# Schemes that are valid URLs without an authority component.
_OPAQUE_SCHEMES = frozenset({"mailto", "news", "file", "data"})


def is_protocol_relative(path: str) -> bool:
    return path.startswith("//")


def is_url(path: str) -> bool:
    """Return True when *path* is a syntactically valid, fully qualified URL.

    Single-letter schemes are rejected so Windows drive paths (``C:\\x``) are
    never mistaken for URLs.
    """
    if not path or any(ch.isspace() for ch in path) or "\\" in path:
        return False
    try:
        parts = urlsplit(path)
    except ValueError:
        return False
    if len(parts.scheme) < 2 or not _SCHEME_RE.match(parts.scheme):
        return False
    if parts.netloc:
        return True
    return parts.scheme.lower() in _OPAQUE_SCHEMES and bool(parts.path)


def is_remote(path: str) -> bool:
    return is_protocol_relative(path) or is_url(path)
