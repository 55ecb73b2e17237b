# File: site_checker/utils.py
"""site_checker.utils: URL helpers shared by the crawler, the link extractor and the checks."""

from __future__ import annotations

from typing import Collection, List, Sequence, Tuple
from urllib.parse import urljoin, urlsplit

from site_checker.logger import logger

__all__: Sequence[str] = (
    "same_origin",
    "resolve_url",
    "path_key",
    "remove_duplicates",
)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _origin_tuple(url: str) -> Tuple[str, str, int | None]:
    parsed = urlsplit(url)
    scheme = parsed.scheme.lower()
    try:
        port = parsed.port
    except ValueError:
        port = None
    return scheme, (parsed.hostname or "").lower(), port or _DEFAULT_PORTS.get(scheme)


def same_origin(url: str, base_url: str) -> bool:
    """True when scheme, host and port of both URLs match."""
    return _origin_tuple(url) == _origin_tuple(base_url)


def resolve_url(path: str, base_url: str) -> str:
    """Resolve *path* (relative or absolute) against *base_url*, dropping the fragment."""
    resolved = urljoin(base_url, path)
    return resolved.split("#", 1)[0]


def path_key(url: str) -> str:
    """Canonical store/frontier key: the origin-relative path of *url*, query and fragment dropped."""
    return urlsplit(url).path or "/"


def remove_duplicates(keys: Collection[str]) -> List[str]:
    """Remove duplicates while preserving order."""
    unique = list(dict.fromkeys(keys))
    removed = len(keys) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate paths", removed)
    return unique
