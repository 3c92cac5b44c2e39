"""
Locate the schema.org ``NewsArticle`` JSON-LD block embedded in a page.

Publishers embed one or more ``<script type="application/ld+json">`` blocks;
each may hold a single object or a list of objects. The first object whose
``@type`` is ``"NewsArticle"`` becomes the page's structured article data.
Blocks that fail to decode are logged and skipped.

Field values inside JSON-LD vary by publisher (``image`` may be a string, an
object or a list of objects, for example), so ``StructuredArticleData``
only hands out values through accessors that check the expected shape.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from bs4 import BeautifulSoup

from .document import find_all

logger = logging.getLogger(__name__)

JSONLD_SCRIPT_TYPE = "application/ld+json"
ARTICLE_TYPE = "NewsArticle"


class StructuredArticleData:
    """Read-only view over a decoded ``NewsArticle`` JSON-LD object."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]):
        self._data = dict(data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"StructuredArticleData({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StructuredArticleData):
            return self._data == other._data
        return NotImplemented

    def get_string(self, key: str) -> str | None:
        value = self._data.get(key)
        if isinstance(value, str):
            return value
        return None

    def get_list(self, key: str) -> list[Any] | None:
        value = self._data.get(key)
        if isinstance(value, list):
            return value
        return None

    def get_object(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        if isinstance(value, dict):
            return value
        return None


def _decode_block(text: str) -> list[Any] | None:
    """Decode one JSON-LD block and normalize it to a list of items."""
    try:
        data = json.loads(text)
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning(f"Error parsing JSON-LD block: {e}")
        return None

    # convert single object {...} to a list of single object [{...}]
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    logger.debug(f"Ignoring JSON-LD block of type {type(data).__name__}")
    return None


def locate_structured_data(
    document: BeautifulSoup,
) -> tuple[StructuredArticleData | None, bool]:
    """Find the first ``NewsArticle`` object among the page's JSON-LD blocks.

    Args:
        document: Parsed page

    Returns:
        Tuple of (structured data, found flag). ``(None, False)`` when no
        block qualifies; callers treat that as "no signal", not an error.
    """
    for script in find_all(document, "script", type=JSONLD_SCRIPT_TYPE):
        text = script.string if script.string is not None else script.get_text()
        items = _decode_block(str(text))
        if not items:
            continue

        for item in items:
            if not isinstance(item, dict):
                continue

            item_type = item.get("@type")
            if not isinstance(item_type, str):
                logger.debug("@type not found or not a string")
                continue

            if item_type == ARTICLE_TYPE:
                return StructuredArticleData(item), True

    return None, False
