from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from docsource.settings import Settings
from docsource.source import DocsSource


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="List every documentation path that must be pre-rendered.")
    parser.add_argument(
        "content_dir",
        type=Path,
        nargs="?",
        default=None,
        help="Content directory to index (default: DOCS_CONTENT_DIR or content/docs)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON params to this file instead of stdout.",
    )
    parser.add_argument(
        "--urls",
        action="store_true",
        help="Emit canonical URLs instead of slug params.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output from the index build.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings()
    content_dir = args.content_dir or settings.content_dir
    source = DocsSource.from_directory(content_dir, settings)

    if args.urls:
        payload: list = [source.url(node) for node in source.get_pages()]
    else:
        payload = source.generate_params()

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        logging.getLogger(__name__).info("Wrote %d paths to %s", len(payload), args.output)
    else:
        print(text)


if __name__ == "__main__":
    main()
