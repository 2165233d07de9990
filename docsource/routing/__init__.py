"""Lookup of content pages by URL path."""

from .resolver import PathResolver
from .urls import split_path, url_for

__all__ = ["PathResolver", "split_path", "url_for"]
