from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from docsource.exceptions import ContentIndexError, DuplicatePathError
from docsource.ingest.frontmatter import read_content_file
from docsource.ingest.manifest import find_manifest, load_manifest, order_children
from docsource.ingest.toc import extract_toc
from docsource.models.node import ContentNode, NodeKind, PageData

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ContentIndexBuilderConfig:
    """Conventions used when scanning a content directory."""

    extensions: Tuple[str, ...] = (".mdx", ".md")
    index_name: str = "index"
    manifest_names: Tuple[str, ...] = ("meta.json", "meta.yaml", "meta.yml")
    ignore_prefix: str = "_"
    include_body: bool = True
    toc_max_depth: int = 6


class ContentIndexBuilder:
    """Scan a content directory into an immutable tree of ContentNodes."""

    def __init__(self, config: ContentIndexBuilderConfig | None = None) -> None:
        self.config = config or ContentIndexBuilderConfig()
        self._extensions = {ext.lower() for ext in self.config.extensions}

    def build(self, root_directory: Path | str) -> ContentNode:
        """Build the whole index; any invalid content file aborts the build."""

        root_path = Path(root_directory)
        if not root_path.is_dir():
            raise ContentIndexError(f"Content directory not found: {root_path}")

        root = self._build_section(root_path, name="", segments=())
        pages, sections = _count(root)
        logger.info("Indexed %s: %d pages in %d sections", root_path, pages, sections)
        return root

    def _build_section(self, directory: Path, *, name: str, segments: Tuple[str, ...]) -> ContentNode:
        section = ContentNode(name=name, kind=NodeKind.SECTION, segments=segments, source_path=directory)
        index_source: Optional[Path] = None

        for entry in sorted(directory.iterdir(), key=lambda path: path.name):
            if self._is_ignored(entry):
                continue

            if entry.is_dir():
                child = self._build_section(entry, name=entry.name, segments=segments + (entry.name,))
                if child.page is None and not child.lookup:
                    logger.debug("Skipping folder without content: %s", entry)
                    continue
                self._add_member(section, child)
                continue

            if not entry.is_file() or entry.suffix.lower() not in self._extensions:
                continue

            if entry.stem == self.config.index_name:
                if index_source is not None:
                    raise DuplicatePathError(segments, index_source, entry)
                index_source = entry
                section.page = self._read_page(entry)
                continue

            page = ContentNode(
                name=entry.stem,
                kind=NodeKind.PAGE,
                segments=segments + (entry.stem,),
                page=self._read_page(entry),
                source_path=entry,
            )
            self._add_member(section, page)

        manifest_path = find_manifest(directory, list(self.config.manifest_names))
        if manifest_path is not None:
            section.manifest = load_manifest(manifest_path)
        section.children = order_children(
            section.manifest,
            section.lookup,
            manifest_path or directory,
            index_name=self.config.index_name,
        )
        section.freeze()
        return section

    def _read_page(self, path: Path) -> PageData:
        metadata, body = read_content_file(path)
        return PageData(
            metadata=metadata,
            body=body if self.config.include_body else "",
            toc=tuple(extract_toc(body, self.config.toc_max_depth)),
            source_path=path,
        )

    def _add_member(self, section: ContentNode, node: ContentNode) -> None:
        existing = section.child(node.name)
        if existing is not None:
            raise DuplicatePathError(node.segments, existing.source_path, node.source_path)
        section.add_member(node)

    def _is_ignored(self, path: Path) -> bool:
        if path.name.startswith("."):
            return True
        prefix = self.config.ignore_prefix
        return bool(prefix) and path.name.startswith(prefix)


def _count(root: ContentNode) -> Tuple[int, int]:
    pages = sections = 0
    for node in root.walk():
        if node.is_page:
            pages += 1
        if node.is_section:
            sections += 1
    return pages, sections


__all__ = ["ContentIndexBuilder", "ContentIndexBuilderConfig"]
