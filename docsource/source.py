from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from docsource.ingest.builder import ContentIndexBuilder
from docsource.models.node import ContentNode
from docsource.routing.resolver import PathResolver
from docsource.settings import Settings, get_settings


class DocsSource:
    """The content index a presentation layer holds for the lifetime of a build."""

    def __init__(self, root: ContentNode, *, base_url: str = "/docs") -> None:
        self.root = root
        self.resolver = PathResolver(root, base_url=base_url)

    @classmethod
    def from_directory(cls, content_dir: Path | str, settings: Settings | None = None) -> "DocsSource":
        settings = settings or get_settings()
        root = ContentIndexBuilder(settings.builder_config()).build(content_dir)
        return cls(root, base_url=settings.base_url)

    def get_page(self, segments: Sequence[str] | None = None) -> Optional[ContentNode]:
        return self.resolver.resolve(segments)

    def get_page_by_url(self, url: str) -> Optional[ContentNode]:
        return self.resolver.resolve_url(url)

    def get_pages(self) -> List[ContentNode]:
        return [node for _, node in self.resolver.enumerate()]

    def enumerate(self) -> Iterator[Tuple[Tuple[str, ...], ContentNode]]:
        return self.resolver.enumerate()

    def generate_params(self) -> List[Dict[str, List[str]]]:
        return self.resolver.generate_params()

    def url(self, node: ContentNode) -> str:
        return self.resolver.url(node)


def load_source(settings: Settings | None = None) -> DocsSource:
    """Build the content index from the configured content directory."""

    settings = settings or get_settings()
    return DocsSource.from_directory(settings.content_dir, settings)


__all__ = ["DocsSource", "load_source"]
