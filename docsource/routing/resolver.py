from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from docsource.models.node import ContentNode
from docsource.routing.urls import split_path, url_for


class PathResolver:
    """Read-only lookups over a built content tree.

    ``resolve`` returns ``None`` for any path that does not name a page;
    a missing page is an ordinary outcome, never an exception.
    """

    def __init__(self, root: ContentNode, *, base_url: str = "/docs") -> None:
        self._root = root
        self.base_url = base_url

    @property
    def root(self) -> ContentNode:
        return self._root

    def resolve(self, segments: Sequence[str] | None) -> Optional[ContentNode]:
        if isinstance(segments, str):
            raise TypeError("segments must be a sequence of path components, not a string")

        node = self._root
        for segment in segments or ():
            if not segment:
                return None
            child = node.child(segment)
            if child is None:
                return None
            node = child
        return node if node.is_page else None

    get_page = resolve

    def resolve_url(self, url: str) -> Optional[ContentNode]:
        segments = split_path(url, self.base_url)
        if segments is None:
            return None
        return self.resolve(segments)

    def enumerate(self) -> Iterator[Tuple[Tuple[str, ...], ContentNode]]:
        """Yield ``(segments, node)`` for every page, pre-order, once each."""

        for node in self._root.walk():
            if node.is_page:
                yield node.segments, node

    def generate_params(self) -> List[Dict[str, List[str]]]:
        """Static parameters for pre-rendering, one ``{"slug": [...]}`` per page."""

        return [{"slug": list(segments)} for segments, _ in self.enumerate()]

    def body(self, segments: Sequence[str] | None) -> Optional[str]:
        node = self.resolve(segments)
        return node.body if node is not None else None

    def metadata(self, segments: Sequence[str] | None) -> Optional[Dict[str, str]]:
        node = self.resolve(segments)
        if node is None or node.metadata is None:
            return None
        return {"title": node.metadata.title, "description": node.metadata.description}

    def url(self, node: ContentNode) -> str:
        return url_for(node.segments, self.base_url)


__all__ = ["PathResolver"]
