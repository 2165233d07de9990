"""Shared helpers for building content trees on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_page(root: Path, relative: str, title: str | None, body: str = "Content.\n", **fields: object) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    for key, value in fields.items():
        lines.append(f"{key}: {json.dumps(value)}")
    lines.append("---")
    path.write_text("\n".join(lines) + "\n\n" + body, encoding="utf-8")
    return path


def write_manifest(root: Path, relative_dir: str, pages: list[str], **fields: object) -> Path:
    directory = root / relative_dir if relative_dir else root
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "meta.json"
    path.write_text(json.dumps({"pages": pages, **fields}), encoding="utf-8")
    return path


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """Home, Guide and Setup pages with a manifest ordering the guide."""

    root = tmp_path / "docs"
    write_page(root, "index.mdx", "Home", description="Start here")
    write_page(root, "guide/index.mdx", "Guide")
    write_page(root, "guide/setup.mdx", "Setup", body="## Install\n\nRun it.\n")
    write_manifest(root, "guide", ["setup"])
    return root
