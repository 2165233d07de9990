from __future__ import annotations

from pathlib import Path


class ContentIndexError(Exception):
    """Base class for failures that abort building the content index."""


class MetadataError(ContentIndexError):
    """A content file has no usable frontmatter block or lacks a title."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid metadata in {self.path}: {reason}")


class ManifestError(ContentIndexError):
    """An ordering manifest could not be read as a mapping."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid manifest {self.path}: {reason}")


class DuplicatePathError(ContentIndexError):
    """Two content sources map to the same segment list."""

    def __init__(self, segments: tuple[str, ...], first: Path | None, second: Path | None) -> None:
        self.segments = segments
        self.first = first
        self.second = second
        joined = "/".join(segments) or "<root>"
        super().__init__(f"Path '{joined}' is defined by both {first} and {second}")


__all__ = ["ContentIndexError", "DuplicatePathError", "ManifestError", "MetadataError"]
