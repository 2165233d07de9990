from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import List, Mapping, Optional, Set

import yaml
from pydantic import ValidationError

from docsource.exceptions import ManifestError
from docsource.models.manifest import EntryKind, Manifest, ManifestEntry
from docsource.models.node import ContentNode, Divider, ExternalLink, TreeEntry

logger = logging.getLogger(__name__)

_DIVIDER_PATTERN = re.compile(r"^---(?P<label>.*?)---$")
_LINK_PATTERN = re.compile(r"^\[(?P<text>[^\]]+)\]\((?P<url>[^)]+)\)$")
_REST = "..."
_REVERSED_REST = "z...a"


def load_manifest(path: Path) -> Manifest:
    """Read and validate an ordering manifest; unreadable files abort the build.

    ``.yaml``/``.yml`` manifests are read with PyYAML, anything else as JSON.
    """

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in {".yaml", ".yml"}:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ManifestError(path, str(exc)) from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ManifestError(path, "manifest must contain a mapping at the top level")
    try:
        return Manifest.model_validate(raw)
    except ValidationError as exc:
        raise ManifestError(path, str(exc)) from exc


def parse_entry(raw: str) -> ManifestEntry:
    value = raw.strip()

    divider = _DIVIDER_PATTERN.match(value)
    if divider:
        return ManifestEntry(EntryKind.DIVIDER, raw, divider.group("label").strip())

    link = _LINK_PATTERN.match(value)
    if link:
        return ManifestEntry(EntryKind.LINK, raw, link.group("text").strip(), link.group("url").strip())

    if value == _REST:
        return ManifestEntry(EntryKind.REST, raw)
    if value == _REVERSED_REST:
        return ManifestEntry(EntryKind.REVERSED_REST, raw)
    if value.startswith(_REST):
        return ManifestEntry(EntryKind.EXTRACT, raw, value[len(_REST) :].strip("/"))
    if value.startswith("!"):
        return ManifestEntry(EntryKind.EXCLUDE, raw, value[1:])
    return ManifestEntry(EntryKind.PAGE, raw, value.strip("/"))


def order_children(
    manifest: Optional[Manifest],
    members: Mapping[str, ContentNode],
    source: Path | str = "<manifest>",
    index_name: str | None = None,
) -> List[TreeEntry]:
    """Merge the manifest's declared order with the members found on disk.

    ``members`` must be in directory-scan order. Declared entries come first;
    members the manifest does not mention fill the ``...`` / ``z...a``
    position, or are appended when neither marker is present. An entry naming
    the section's own index page is skipped, since that page is never a child.
    Entries such as ``guide/setup`` place a nested page by its relative path.
    """

    entries = [parse_entry(item) for item in manifest.pages] if manifest else []
    excluded: Set[str] = {entry.value for entry in entries if entry.kind is EntryKind.EXCLUDE}

    ordered: List[TreeEntry] = []
    placed: Set[str] = set()
    rest_at: int | None = None
    rest_reversed = False

    for entry in entries:
        if entry.kind is EntryKind.PAGE:
            if index_name is not None and entry.value == index_name:
                continue
            node = _find_member(members, entry.value)
            if node is None:
                logger.warning("Manifest %s references unknown entry '%s'; ignoring it", source, entry.value)
                continue
            if entry.value in placed:
                continue
            ordered.append(node)
            placed.add(entry.value)
        elif entry.kind is EntryKind.DIVIDER:
            ordered.append(Divider(label=entry.value))
        elif entry.kind is EntryKind.LINK:
            ordered.append(ExternalLink(text=entry.value, url=entry.url or ""))
        elif entry.kind in (EntryKind.REST, EntryKind.REVERSED_REST):
            if rest_at is not None:
                continue
            rest_at = len(ordered)
            rest_reversed = entry.kind is EntryKind.REVERSED_REST
        elif entry.kind is EntryKind.EXTRACT:
            folder = members.get(entry.value)
            if folder is None or not folder.is_section:
                logger.warning("Manifest %s cannot extract '%s': no such folder; ignoring it", source, entry.value)
                continue
            if entry.value in placed:
                continue
            ordered.extend(folder.children)
            placed.add(entry.value)

    rest = [node for name, node in members.items() if name not in placed and name not in excluded]
    if rest_reversed:
        rest.reverse()

    if rest_at is None:
        return ordered + rest
    return ordered[:rest_at] + rest + ordered[rest_at:]


def _find_member(members: Mapping[str, ContentNode], value: str) -> Optional[ContentNode]:
    head, _, tail = value.partition("/")
    node = members.get(head)
    for part in tail.split("/") if tail else ():
        if node is None:
            return None
        node = node.child(part)
    return node


def find_manifest(directory: Path, names: List[str]) -> Optional[Path]:
    for name in names:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


__all__ = ["find_manifest", "load_manifest", "order_children", "parse_entry"]
