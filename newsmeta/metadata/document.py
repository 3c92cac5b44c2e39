"""Thin query layer over a parsed BeautifulSoup document.

The field extractors only need a handful of operations: find nodes, read
their text, and read ``<meta>`` content values. Keeping them here means the
extractors never deal with BeautifulSoup's attribute shapes directly.
"""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup, Tag


def parse_document(markup: str | bytes | None) -> BeautifulSoup:
    """Parse raw markup with the stdlib ``html.parser`` backend."""
    return BeautifulSoup(markup or "", "html.parser")


def attribute_text(node: Tag, name: str) -> str:
    """Return an attribute as a single string.

    BeautifulSoup exposes multi-valued attributes (``class``, ``rel``) as
    lists; join them so substring checks behave like they do on raw markup.
    """
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def find_all(document: BeautifulSoup, name: Any = True, **attrs: Any) -> list[Tag]:
    """Return all matching elements in document order."""
    return [node for node in document.find_all(name, attrs=attrs) if isinstance(node, Tag)]


def find_first(document: BeautifulSoup, name: Any = True, **attrs: Any) -> Tag | None:
    node = document.find(name, attrs=attrs)
    if isinstance(node, Tag):
        return node
    return None


def inner_text(node: Tag | None) -> str:
    """Text content of ``node`` with surrounding whitespace removed."""
    if node is None:
        return ""
    return node.get_text().strip()


def meta_contents(
    document: BeautifulSoup,
    key: str,
    attributes: tuple[str, ...] = ("property", "name"),
) -> list[str]:
    """Collect ``content`` values of every ``<meta>`` whose key matches.

    ``key`` is compared case-insensitively against each attribute listed in
    ``attributes`` (OpenGraph tags show up under both ``property`` and
    ``name`` in the wild).
    """
    wanted = key.lower()
    values: list[str] = []

    for meta in find_all(document, "meta"):
        if not any(attribute_text(meta, attr).strip().lower() == wanted for attr in attributes):
            continue
        content = attribute_text(meta, "content").strip()
        if content:
            values.append(content)

    return values


def meta_content(
    document: BeautifulSoup,
    key: str,
    attributes: tuple[str, ...] = ("property", "name"),
) -> str:
    """First non-empty ``content`` for ``key`` or an empty string."""
    values = meta_contents(document, key, attributes)
    return values[0] if values else ""
