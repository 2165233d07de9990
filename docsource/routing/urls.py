from __future__ import annotations

from typing import List, Optional, Sequence
from urllib.parse import quote, unquote, urlsplit


def split_path(url: str, base_url: str = "/docs") -> Optional[List[str]]:
    """Turn a request URL into path segments below ``base_url``.

    Returns ``None`` when the URL is outside ``base_url``. Empty components
    (``a//b``) are kept so that lookups on them miss.
    """

    path = urlsplit(url).path
    base = base_url.rstrip("/")
    if base:
        if path in (base, f"{base}/"):
            return []
        if not path.startswith(f"{base}/"):
            return None
        path = path[len(base) + 1 :]
    elif path.startswith("/"):
        path = path[1:]

    if not path:
        return []
    if path.endswith("/"):
        path = path[:-1]
    return [unquote(part) for part in path.split("/")]


def url_for(segments: Sequence[str], base_url: str = "/docs") -> str:
    base = base_url.rstrip("/")
    if not segments:
        return base or "/"
    return "/".join([base] + [quote(segment) for segment in segments])


__all__ = ["split_path", "url_for"]
