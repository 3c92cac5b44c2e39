"""Result records produced by the article extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

RAW_HTML_SNIPPET_LENGTH = 100


@dataclass(frozen=True)
class Article:
    """Metadata extracted from a single news article page."""

    title: str = ""
    url: str = ""
    authors: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    full_text: str = ""
    published_date: str = ""
    image: str = ""
    keywords: tuple[str, ...] = field(default_factory=tuple)
    raw_html: str = ""

    def __post_init__(self):
        # Accept any iterable for the list fields but store tuples
        object.__setattr__(self, "authors", tuple(self.authors))
        object.__setattr__(self, "keywords", tuple(self.keywords))
        if len(self.raw_html) > RAW_HTML_SNIPPET_LENGTH:
            object.__setattr__(self, "raw_html", self.raw_html[:RAW_HTML_SNIPPET_LENGTH])

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping using the published field names."""
        return {
            "title": self.title,
            "url": self.url,
            "authors": list(self.authors),
            "description": self.description,
            "full_text": self.full_text,
            "published_date": self.published_date,
            "image": self.image,
            "keywords": list(self.keywords),
            "raw_html": self.raw_html,
        }
