"""Render a markdown file to HTML from the command line."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from bs4 import BeautifulSoup

from prose import DEFAULT_DOCUMENT, render_timed


def main() -> None:
    parser = argparse.ArgumentParser(description="Render markdown to an HTML fragment.")
    parser.add_argument("--file", help="Markdown file path (defaults to the sample document)")
    parser.add_argument("--pretty", action="store_true", help="Indent the HTML output")
    parser.add_argument("--timing", action="store_true", help="Print parse and render time")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    source = load_markdown(file_path=args.file)
    result = render_timed(source)

    html = result.html
    if args.pretty:
        html = BeautifulSoup(html, "html.parser").prettify()
    print(html)

    if args.timing:
        print(f"\nRendered {result.source_chars} chars into {result.block_count} blocks in {result.elapsed_ms:.3f} ms")


def load_markdown(*, file_path: str | None) -> str:
    if not file_path:
        return DEFAULT_DOCUMENT

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    main()
