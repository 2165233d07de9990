from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, field_validator


class PageMetadata(BaseModel):
    """Frontmatter record validated once per content file at build time."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str
    description: str = ""
    keywords: List[str] | None = None
    icon: str | None = None
    full: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def _require_title(cls, value: object) -> str:
        if value is None:
            raise ValueError("title must not be empty")
        title = str(value).strip()
        if not title:
            raise ValueError("title must not be empty")
        return title

    @field_validator("description", mode="before")
    @classmethod
    def _normalize_description(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("keywords", mode="before")
    @classmethod
    def _split_keywords(cls, value: object) -> List[str] | None:
        if value is None:
            return None
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, (list, tuple, set)):
            return [str(item).strip() for item in value if str(item).strip()]
        raise ValueError("keywords must be a list of strings or a comma separated string")

    def extras(self) -> Dict[str, Any]:
        """Frontmatter keys that are not part of the fixed record."""

        return dict(self.model_extra or {})


__all__ = ["PageMetadata"]
