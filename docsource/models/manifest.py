from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Manifest(BaseModel):
    """Per-directory ordering manifest (``meta.json``)."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    icon: str | None = None
    root: bool = False
    default_open: bool = Field(default=False, alias="defaultOpen")
    pages: List[str] = Field(default_factory=list)


class EntryKind(str, Enum):
    PAGE = "page"
    DIVIDER = "divider"
    LINK = "link"
    REST = "rest"
    REVERSED_REST = "reversed_rest"
    EXTRACT = "extract"
    EXCLUDE = "exclude"


@dataclass(slots=True, frozen=True)
class ManifestEntry:
    """One parsed item of a manifest's ``pages`` list."""

    kind: EntryKind
    raw: str
    value: str = ""
    url: str | None = None


__all__ = ["EntryKind", "Manifest", "ManifestEntry"]
