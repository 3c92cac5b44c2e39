"""CLI command module for extracting metadata from a saved HTML file."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def add_extract_html_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "extract-html", help="Extract article metadata from a local HTML file"
    )
    parser.add_argument("path", type=str, help="Path to the saved HTML page")
    parser.add_argument(
        "--url", type=str, required=True, help="URL the page was fetched from"
    )
    parser.add_argument(
        "--final-url",
        dest="final_url",
        type=str,
        default=None,
        help="URL after redirects, if different from --url",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation width (default: 2)",
    )
    parser.set_defaults(func=handle_extract_html_command)
    return parser


def handle_extract_html_command(args) -> int:
    from newsmeta.cli.context import print_article_json
    from newsmeta.config import get_settings
    from newsmeta.crawler import extract_article

    path = Path(args.path)
    try:
        body = path.read_bytes()
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        return 1

    article = extract_article(
        args.url,
        body,
        getattr(args, "final_url", None),
        snippet_length=get_settings().snippet_length,
    )
    print_article_json(article, indent=getattr(args, "indent", 2))
    return 0
