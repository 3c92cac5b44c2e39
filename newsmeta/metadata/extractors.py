"""Per-field extractors.

Every extractor takes the parsed document plus the optional structured
article data and returns a best-effort value. Missing signals resolve to an
empty string or list; nothing here raises for absent or oddly shaped data.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from newsmeta.utils.text_normalizer import (
    is_valid_date,
    normalize_whitespace,
    remove_duplicates,
    trim,
)

from .document import (
    attribute_text,
    find_all,
    find_first,
    inner_text,
    meta_content,
    meta_contents,
)
from .structured_data import StructuredArticleData

logger = logging.getLogger(__name__)

_BYLINE_PREFIX_RE = re.compile(r"^by(?::|\s+|$)\s*", re.IGNORECASE)

AUTHOR_ATTRIBUTES = ("class", "id", "rel")
AUTHOR_META_KEYS = ("article:author", "author")
AUTHOR_URL_FRAGMENT = "/author/"

# Elements whose text is never a byline even if their class/id mentions authors
NON_TEXT_ELEMENTS = frozenset({"meta", "link", "script", "style", "noscript"})

DESCRIPTION_META_KEYS = (
    ("og:description", ("property", "name")),
    ("description", ("name",)),
    ("twitter:description", ("name", "property")),
)

IMAGE_META_KEYS = ("og:image", "twitter:image")

KEYWORD_META_NAMES = ("keywords", "keyword")


def _structured_string(structured_data: StructuredArticleData | None, key: str) -> str:
    if structured_data is None:
        return ""
    return trim(structured_data.get_string(key))


def extract_title(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> str:
    """Resolve the article title.

    The first ``<h1>`` wins when one of the other sources merely wraps it in
    site branding (i.e. contains it, ignoring case). Otherwise fall back to
    ``<title>``, ``og:title`` and ``<meta name="title">`` in that order.
    """
    title_text = inner_text(find_first(document, "title"))
    og_title = meta_content(document, "og:title")
    meta_title = meta_content(document, "title", attributes=("name",))
    h1_text = inner_text(find_first(document, "h1"))
    headline = _structured_string(structured_data, "headline")

    if h1_text:
        needle = h1_text.lower()
        for candidate in (title_text, og_title, headline):
            if candidate and needle in candidate.lower():
                return h1_text

    for candidate in (title_text, og_title, meta_title):
        if candidate:
            return candidate

    return ""


def _structured_author_names(structured_data: StructuredArticleData | None) -> list[str]:
    if structured_data is None:
        return []

    entries = structured_data.get_list("author")
    if entries is None:
        single = structured_data.get_object("author")
        entries = [single] if single is not None else []

    names = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        if isinstance(name, str):
            names.append(name)
    return names


def _has_author_attribute(node: Tag) -> bool:
    return any("author" in attribute_text(node, attr) for attr in AUTHOR_ATTRIBUTES)


def _strip_byline_prefix(text: str) -> str:
    return _BYLINE_PREFIX_RE.sub("", text, count=1).strip()


def extract_authors(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> list[str]:
    """Collect author names from JSON-LD, meta tags, bylines and author links."""
    candidates: list[str] = []

    candidates.extend(_structured_author_names(structured_data))

    for key in AUTHOR_META_KEYS:
        candidates.extend(meta_contents(document, key))

    for node in document.find_all(_has_author_attribute):
        if node.name in NON_TEXT_ELEMENTS:
            continue
        candidates.append(_strip_byline_prefix(normalize_whitespace(node.get_text(" "))))

    for anchor in find_all(document, "a", href=True):
        if AUTHOR_URL_FRAGMENT in attribute_text(anchor, "href"):
            candidates.append(normalize_whitespace(anchor.get_text(" ")))

    return remove_duplicates(candidates)


def extract_description(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> str:
    for key, attributes in DESCRIPTION_META_KEYS:
        value = meta_content(document, key, attributes=attributes)
        if value:
            return value

    return _structured_string(structured_data, "description")


def extract_full_text(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> str:
    """Body text extraction is not performed; always empty."""
    return ""


def extract_published_date(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> str:
    """Return the first publish-date candidate that looks like a date.

    Candidates: ``article:published_time`` meta, each ``<time datetime>``,
    then JSON-LD ``datePublished``. The value is returned as found, not
    parsed or reformatted.
    """
    candidates = meta_contents(document, "article:published_time")[:1]
    candidates.extend(
        trim(attribute_text(node, "datetime"))
        for node in find_all(document, "time", datetime=True)
    )

    for candidate in candidates:
        if is_valid_date(candidate):
            return candidate
        logger.debug(f"Rejected publish date candidate '{candidate}'")

    date_published = _structured_string(structured_data, "datePublished")
    if is_valid_date(date_published):
        return date_published

    return ""


def _structured_image(structured_data: StructuredArticleData | None) -> str:
    if structured_data is None:
        return ""

    # {"image": "https://..."}
    url = structured_data.get_string("image")
    if url is not None:
        return trim(url)

    # {"image": [{"url": "https://..."}, ...]}
    images = structured_data.get_list("image")
    if images is not None:
        first = images[0] if images else None
        if isinstance(first, dict) and isinstance(first.get("url"), str):
            return trim(first["url"])
        return ""

    # {"image": {"url": "https://..."}}
    image = structured_data.get_object("image")
    if image is not None and isinstance(image.get("url"), str):
        return trim(image["url"])

    return ""


def extract_image(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> str:
    for key in IMAGE_META_KEYS:
        value = meta_content(document, key)
        if value:
            return value

    return _structured_image(structured_data)


def extract_keywords(
    document: BeautifulSoup, structured_data: StructuredArticleData | None = None
) -> list[str]:
    """Split ``<meta name="keywords">`` values on commas and de-duplicate."""
    pieces: list[str] = []

    for name in KEYWORD_META_NAMES:
        for content in meta_contents(document, name, attributes=("name",)):
            pieces.extend(piece.strip() for piece in content.split(","))

    return remove_duplicates(piece for piece in pieces if len(piece) > 1)
