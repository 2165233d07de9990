import json
import logging

import pytest

from docsource.exceptions import ManifestError
from docsource.ingest.manifest import load_manifest, order_children, parse_entry
from docsource.models.manifest import EntryKind, Manifest
from docsource.models.node import ContentNode, Divider, ExternalLink, NodeKind


def _page(name: str) -> ContentNode:
    return ContentNode(name=name, kind=NodeKind.PAGE, segments=(name,))


def _members(*names: str) -> dict:
    return {name: _page(name) for name in names}


def _names(entries) -> list:
    return [entry.name if isinstance(entry, ContentNode) else entry for entry in entries]


@pytest.mark.parametrize(
    ("raw", "kind", "value"),
    [
        ("setup", EntryKind.PAGE, "setup"),
        ("---Getting Started---", EntryKind.DIVIDER, "Getting Started"),
        ("------", EntryKind.DIVIDER, ""),
        ("...", EntryKind.REST, ""),
        ("z...a", EntryKind.REVERSED_REST, ""),
        ("...plugins", EntryKind.EXTRACT, "plugins"),
        ("!drafts", EntryKind.EXCLUDE, "drafts"),
    ],
)
def test_parse_entry_kinds(raw, kind, value):
    entry = parse_entry(raw)

    assert entry.kind is kind
    assert entry.value == value


def test_parse_entry_link():
    entry = parse_entry("[GitHub](https://github.com/example/repo)")

    assert entry.kind is EntryKind.LINK
    assert entry.value == "GitHub"
    assert entry.url == "https://github.com/example/repo"


def test_order_children_appends_unlisted_members_in_scan_order():
    members = _members("a", "b", "c")
    manifest = Manifest(pages=["b", "a"])

    assert _names(order_children(manifest, members)) == ["b", "a", "c"]


def test_order_children_without_manifest_keeps_scan_order():
    assert _names(order_children(None, _members("x", "y"))) == ["x", "y"]


def test_order_children_places_rest_at_marker_and_keeps_display_entries():
    members = _members("a", "b", "c", "d")
    manifest = Manifest(pages=["---Basics---", "c", "...", "[Repo](https://example.com)", "a"])

    ordered = order_children(manifest, members)

    assert ordered[0] == Divider(label="Basics")
    assert _names(ordered[1:4]) == ["c", "b", "d"]
    assert ordered[4] == ExternalLink(text="Repo", url="https://example.com")
    assert _names(ordered[5:]) == ["a"]


def test_order_children_reversed_rest_and_exclusions():
    members = _members("a", "b", "c", "d")
    manifest = Manifest(pages=["z...a", "!b"])

    assert _names(order_children(manifest, members)) == ["d", "c", "a"]


def test_order_children_drops_unknown_references_with_warning(caplog):
    members = _members("a", "b")
    manifest = Manifest(pages=["a", "x", "a"])

    with caplog.at_level(logging.WARNING, logger="docsource.ingest.manifest"):
        ordered = order_children(manifest, members, "guide/meta.json")

    assert _names(ordered) == ["a", "b"]
    assert "'x'" in caplog.text
    assert "guide/meta.json" in caplog.text


def test_order_children_extracts_folder_children():
    folder = ContentNode(name="plugins", kind=NodeKind.SECTION, segments=("plugins",))
    inner = ContentNode(name="sql", kind=NodeKind.PAGE, segments=("plugins", "sql"))
    folder.add_member(inner)
    folder.children = [inner]
    members = {"intro": _page("intro"), "plugins": folder}

    ordered = order_children(Manifest(pages=["intro", "...plugins"]), members)

    assert ordered == [members["intro"], inner]


def test_load_manifest_reads_json_and_aliases(tmp_path):
    path = tmp_path / "meta.json"
    path.write_text(json.dumps({"title": "Guide", "defaultOpen": True, "pages": ["a"]}), encoding="utf-8")

    manifest = load_manifest(path)

    assert manifest.title == "Guide"
    assert manifest.default_open is True
    assert manifest.pages == ["a"]


def test_load_manifest_reads_yaml(tmp_path):
    path = tmp_path / "meta.yaml"
    path.write_text("pages:\n  - b\n  - a\n", encoding="utf-8")

    assert load_manifest(path).pages == ["b", "a"]


@pytest.mark.parametrize("content", ["{not json", "[\"a\", \"b\"]", "{\"pages\": \"a\"}"])
def test_load_manifest_rejects_malformed_files(tmp_path, content):
    path = tmp_path / "meta.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ManifestError):
        load_manifest(path)


def test_order_children_skips_own_index_entry_silently(caplog):
    members = _members("a", "b")
    manifest = Manifest(pages=["index", "b"])

    with caplog.at_level(logging.WARNING, logger="docsource.ingest.manifest"):
        ordered = order_children(manifest, members, "meta.json", index_name="index")

    assert _names(ordered) == ["b", "a"]
    assert caplog.records == []


def test_order_children_resolves_nested_entries():
    folder = ContentNode(name="guide", kind=NodeKind.SECTION, segments=("guide",))
    setup = ContentNode(name="setup", kind=NodeKind.PAGE, segments=("guide", "setup"))
    folder.add_member(setup)
    members = {"guide": folder, "intro": _page("intro")}

    ordered = order_children(Manifest(pages=["guide/setup", "intro"]), members)

    assert ordered == [setup, members["intro"], folder]


def test_load_manifest_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "meta.json"
    path.write_bytes(b"{\"pages\": [\"\xff\"]}")

    with pytest.raises(ManifestError):
        load_manifest(path)
