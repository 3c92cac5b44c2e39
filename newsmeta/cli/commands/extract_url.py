"""CLI command module for extracting metadata from a single URL.

Fetches the page, runs the field extractors and prints the resulting
article record as indented JSON on stdout.
"""
from __future__ import annotations

import argparse
import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def add_extract_url_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "extract-url", help="Fetch a URL and print its article metadata as JSON"
    )
    parser.add_argument("url", type=str, help="URL to extract")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: NEWSMETA_TIMEOUT or 20)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation width (default: 2)",
    )
    parser.set_defaults(func=handle_extract_url_command)
    return parser


def handle_extract_url_command(args) -> int:
    """Fetch ``args.url`` and print the extracted article."""
    # Lazy import keeps CLI startup fast
    from newsmeta.cli.context import print_article_json
    from newsmeta.crawler import ArticleParser, FetchError, NewsFetcher

    url = getattr(args, "url", None)
    if not url:
        logger.error("No URL provided")
        return 1

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        logger.error(f"Invalid URL: {url}")
        return 1

    fetcher = NewsFetcher(timeout=getattr(args, "timeout", None))
    parser = ArticleParser(fetcher=fetcher)

    try:
        article = parser.parse(url)
    except FetchError as e:
        logger.error(f"Could not fetch {url}: {e}")
        return 1

    print_article_json(article, indent=getattr(args, "indent", 2))
    return 0
