from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import ValidationError

from docsource.exceptions import MetadataError
from docsource.models.metadata import PageMetadata


_DELIMITER = "---"


def split_frontmatter(text: str, path: Path | str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Separate the leading YAML block from the document body.

    The block must open on the first line with ``---`` and close with a
    second ``---`` line. Anything else is a ``MetadataError``.
    """

    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != _DELIMITER:
        raise MetadataError(path, "missing frontmatter block")

    for index in range(1, len(lines)):
        if lines[index].strip() == _DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        raise MetadataError(path, "frontmatter block is not closed")

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise MetadataError(path, f"frontmatter is not valid YAML ({exc})") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MetadataError(path, "frontmatter must be a mapping")
    return data, body.lstrip("\n")


def parse_metadata(data: Dict[str, Any], path: Path | str = "<string>") -> PageMetadata:
    try:
        return PageMetadata.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'metadata'}: {error['msg']}"
            for error in exc.errors()
        )
        raise MetadataError(path, problems) from exc


def read_content_file(path: Path) -> Tuple[PageMetadata, str]:
    """Load a content file and return its validated metadata and body."""

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MetadataError(path, "file is not valid UTF-8") from exc
    data, body = split_frontmatter(text, path)
    return parse_metadata(data, path), body


__all__ = ["parse_metadata", "read_content_file", "split_frontmatter"]
