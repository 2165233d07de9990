"""Scanning of content files and ordering manifests into a content tree."""

from .builder import ContentIndexBuilder, ContentIndexBuilderConfig
from .frontmatter import parse_metadata, read_content_file, split_frontmatter
from .manifest import load_manifest, order_children, parse_entry
from .toc import extract_toc

__all__ = [
    "ContentIndexBuilder",
    "ContentIndexBuilderConfig",
    "extract_toc",
    "load_manifest",
    "order_children",
    "parse_entry",
    "parse_metadata",
    "read_content_file",
    "split_frontmatter",
]
