"""Shared CLI runtime helpers."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from newsmeta.models import Article

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging; output goes to stderr so stdout stays JSON."""
    log_level = getattr(logging, str(level).upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def print_article_json(article: Article, indent: int = 2) -> None:
    """Write an Article as indented JSON on stdout."""
    print(json.dumps(article.to_dict(), indent=indent, ensure_ascii=False))
