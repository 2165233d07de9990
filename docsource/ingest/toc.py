from __future__ import annotations

import re
from typing import Dict, List

from docsource.ingest.utils import slugify
from docsource.models.node import TocEntry


_HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<title>.+?)(?:\s+#+)?\s*$")
_CUSTOM_ID_PATTERN = re.compile(r"\s*\[#(?P<id>[\w-]+)\]$")
_FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
_INLINE_MARKUP = re.compile(r"[*_`]")


def extract_toc(body: str, max_depth: int = 6) -> List[TocEntry]:
    """Collect the markdown headings of a page body as anchor entries.

    Headings inside fenced code blocks are ignored. A trailing ``[#id]``
    overrides the generated anchor; repeated anchors get a numeric suffix.
    """

    entries: List[TocEntry] = []
    seen: Dict[str, int] = {}
    fence: str | None = None

    for line in body.splitlines():
        fence_match = _FENCE_PATTERN.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif fence == marker:
                fence = None
            continue
        if fence is not None:
            continue

        match = _HEADING_PATTERN.match(line)
        if not match:
            continue
        depth = len(match.group("hashes"))
        if depth > max_depth:
            continue

        title = match.group("title")
        custom = _CUSTOM_ID_PATTERN.search(title)
        if custom:
            title = title[: custom.start()]
            anchor = custom.group("id")
        else:
            title = _INLINE_MARKUP.sub("", title)
            anchor = slugify(title)
        title = title.strip()

        count = seen.get(anchor, 0)
        seen[anchor] = count + 1
        if count:
            anchor = f"{anchor}-{count}"

        entries.append(TocEntry(title=title, url=f"#{anchor}", depth=depth))

    return entries


__all__ = ["extract_toc"]
