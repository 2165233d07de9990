from docsource.ingest.toc import extract_toc


def test_extract_toc_collects_headings_with_anchors():
    body = (
        "# Intro\n\nText.\n\n"
        "## Setup `cli`\n\n"
        "```bash\n# not a heading\n```\n\n"
        "## Setup cli\n\n"
        "### Custom [#my-id]\n\n"
        "## Closing ##\n"
    )

    toc = extract_toc(body)

    assert [(entry.title, entry.url, entry.depth) for entry in toc] == [
        ("Intro", "#intro", 1),
        ("Setup cli", "#setup-cli", 2),
        ("Setup cli", "#setup-cli-1", 2),
        ("Custom", "#my-id", 3),
        ("Closing", "#closing", 2),
    ]


def test_extract_toc_respects_max_depth():
    toc = extract_toc("## Two\n\n### Three\n\n#### Four\n", max_depth=2)

    assert [entry.title for entry in toc] == ["Two"]


def test_extract_toc_ignores_hash_without_space():
    assert extract_toc("#hashtag\n\nC# is fine\n") == []
