"""Content index and path resolution for the documentation site."""

from .exceptions import ContentIndexError, DuplicatePathError, ManifestError, MetadataError
from .models.node import ContentNode, NodeKind
from .routing.resolver import PathResolver
from .source import DocsSource, load_source

__all__ = [
    "ContentIndexError",
    "ContentNode",
    "DocsSource",
    "DuplicatePathError",
    "ManifestError",
    "MetadataError",
    "NodeKind",
    "PathResolver",
    "load_source",
]
