from .manifest import EntryKind, Manifest, ManifestEntry
from .metadata import PageMetadata
from .node import ContentNode, Divider, ExternalLink, NodeKind, PageData, TocEntry, TreeEntry

__all__ = [
    "ContentNode",
    "Divider",
    "EntryKind",
    "ExternalLink",
    "Manifest",
    "ManifestEntry",
    "NodeKind",
    "PageData",
    "PageMetadata",
    "TocEntry",
    "TreeEntry",
]
