from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from docsource.ingest.builder import ContentIndexBuilderConfig

load_dotenv(override=False)


DEFAULT_EXTENSIONS = [".mdx", ".md"]
DEFAULT_MANIFEST_NAMES = ["meta.json", "meta.yaml", "meta.yml"]


class Settings(BaseModel):
    """Build-time configuration for the documentation content source."""

    content_dir: Path = Field(default_factory=lambda: Path(os.getenv("DOCS_CONTENT_DIR", "content/docs")))
    base_url: str = Field(default_factory=lambda: os.getenv("DOCS_BASE_URL", "/docs"))
    extensions: List[str] = Field(default_factory=lambda: os.getenv("DOCS_EXTENSIONS", ".mdx,.md"))
    manifest_names: List[str] = Field(default_factory=lambda: list(DEFAULT_MANIFEST_NAMES))
    index_name: str = Field(default_factory=lambda: os.getenv("DOCS_INDEX_NAME", "index"))
    ignore_prefix: str = Field(default_factory=lambda: os.getenv("DOCS_IGNORE_PREFIX", "_"))
    toc_max_depth: int = Field(default_factory=lambda: int(os.getenv("DOCS_TOC_DEPTH", "6")))
    include_body: bool = Field(
        default_factory=lambda: os.getenv("DOCS_INCLUDE_BODY", "true").lower() not in {"0", "false"}
    )

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_EXTENSIONS)
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",") if item.strip()]
        else:
            items = [str(item).strip() for item in value]
        if not items:
            return list(DEFAULT_EXTENSIONS)
        return [item if item.startswith(".") else f".{item}" for item in items]

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value or value == "/":
            return ""
        return "/" + value.strip("/")

    @field_validator("toc_max_depth")
    @classmethod
    def _clamp_depth(cls, value: int) -> int:
        return max(1, min(value, 6))

    def builder_config(self) -> ContentIndexBuilderConfig:
        return ContentIndexBuilderConfig(
            extensions=tuple(self.extensions),
            index_name=self.index_name,
            manifest_names=tuple(self.manifest_names),
            ignore_prefix=self.ignore_prefix,
            include_body=self.include_body,
            toc_max_depth=self.toc_max_depth,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance read from the environment."""

    return Settings()


__all__ = ["Settings", "get_settings"]
