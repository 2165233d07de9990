from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from docsource.models.manifest import Manifest
from docsource.models.metadata import PageMetadata


class NodeKind(str, Enum):
    PAGE = "page"
    SECTION = "section"


@dataclass(slots=True, frozen=True)
class TocEntry:
    """A heading inside a page body, addressable by its anchor."""

    title: str
    url: str
    depth: int


@dataclass(slots=True)
class PageData:
    """Renderable content of a page: validated metadata plus the raw body."""

    metadata: PageMetadata
    body: str
    toc: Sequence[TocEntry] = field(default_factory=tuple)
    source_path: Optional[Path] = None


@dataclass(slots=True, frozen=True)
class Divider:
    label: str


@dataclass(slots=True, frozen=True)
class ExternalLink:
    text: str
    url: str


@dataclass(slots=True, eq=False)
class ContentNode:
    """A page or section of the content tree.

    ``children`` holds the display order (nodes, dividers and links) while
    ``lookup`` maps local identifiers to the nodes that live directly under
    this section on disk. Sections carrying an index page have ``page`` set.
    Once built, ``freeze`` turns both into read-only views.
    """

    name: str
    kind: NodeKind
    segments: Tuple[str, ...]
    page: Optional[PageData] = None
    manifest: Optional[Manifest] = None
    source_path: Optional[Path] = None
    children: Sequence[Union["ContentNode", Divider, ExternalLink]] = field(default_factory=list)
    lookup: Mapping[str, "ContentNode"] = field(default_factory=dict, repr=False)

    @property
    def id(self) -> str:
        return "/".join(self.segments)

    @property
    def is_page(self) -> bool:
        return self.page is not None

    @property
    def is_section(self) -> bool:
        return self.kind is NodeKind.SECTION

    @property
    def title(self) -> str:
        if self.page is not None:
            return self.page.metadata.title
        if self.manifest is not None and self.manifest.title:
            return self.manifest.title
        return self.name

    @property
    def metadata(self) -> Optional[PageMetadata]:
        return self.page.metadata if self.page is not None else None

    @property
    def body(self) -> Optional[str]:
        """Raw page body handed to the renderer untouched."""

        return self.page.body if self.page is not None else None

    def child(self, identifier: str) -> Optional["ContentNode"]:
        """Return the direct member named ``identifier``; dividers and links never match."""

        return self.lookup.get(identifier)

    def add_member(self, node: "ContentNode") -> None:
        if isinstance(self.lookup, MappingProxyType):
            raise TypeError(f"Section '{self.id}' is frozen")
        self.lookup[node.name] = node  # type: ignore[index]

    def freeze(self) -> None:
        self.children = tuple(self.children)
        self.lookup = MappingProxyType(dict(self.lookup))

    def members(self) -> List["ContentNode"]:
        return list(self.lookup.values())

    def walk(self) -> Iterator["ContentNode"]:
        """Pre-order walk over this node and every structural descendant."""

        yield self
        for member in self.lookup.values():
            yield from member.walk()

    def child_nodes(self) -> Iterator["ContentNode"]:
        """Children in display order, skipping dividers and links."""

        for entry in self.children:
            if isinstance(entry, ContentNode):
                yield entry


TreeEntry = Union[ContentNode, Divider, ExternalLink]


__all__ = [
    "ContentNode",
    "Divider",
    "ExternalLink",
    "NodeKind",
    "PageData",
    "TocEntry",
    "TreeEntry",
]
