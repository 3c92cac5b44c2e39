"""Field-resolution engine: structured data lookup and per-field extractors."""

from .extractors import (
    extract_authors,
    extract_description,
    extract_full_text,
    extract_image,
    extract_keywords,
    extract_published_date,
    extract_title,
)
from .structured_data import StructuredArticleData, locate_structured_data

__all__ = [
    "StructuredArticleData",
    "extract_authors",
    "extract_description",
    "extract_full_text",
    "extract_image",
    "extract_keywords",
    "extract_published_date",
    "extract_title",
    "locate_structured_data",
]
