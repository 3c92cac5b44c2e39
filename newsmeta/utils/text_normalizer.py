"""
Text normalization helpers shared by the field extractors.

Covers whitespace trimming, case-insensitive de-duplication, trailing site
name removal for titles, stop-word filtering and the loose date check used
by the published-date extractor.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Loose sanity check: any YYYY-M-D substring counts as a date
DATE_PATTERN = re.compile(r"\d{4}-\d{1,2}-\d{1,2}")

TITLE_SEPARATORS = (" - ", " | ")

# A tail with this many words or more is part of the headline, not a site name
SITE_NAME_MAX_WORDS = 5

STOP_WORDS = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "am", "an",
        "and", "any", "are", "aren't", "as", "at", "be", "because", "been",
        "before", "being", "below", "between", "both", "but", "by", "can't",
        "cannot", "could", "couldn't", "did", "didn't", "do", "does",
        "doesn't", "doing", "don't", "down", "during", "each", "few", "for",
        "from", "further", "had", "hadn't", "has", "hasn't", "have",
        "haven't", "having", "he", "he'd", "he'll", "he's", "her", "here",
        "here's", "hers", "herself", "him", "himself", "his", "how", "how's",
        "i", "i'd", "i'll", "i'm", "i've", "if", "in", "into", "is", "isn't",
        "it", "it's", "its", "itself", "let's", "me", "more", "most",
        "mustn't", "my", "myself", "no", "nor", "not", "of", "off", "on",
        "once", "only", "or", "other", "ought", "our", "ours", "ourselves",
        "out", "over", "own", "same", "shan't", "she", "she'd", "she'll",
        "she's", "should", "shouldn't", "so", "some", "such", "than", "that",
        "that's", "the", "their", "theirs", "them", "themselves", "then",
        "there", "there's", "these", "they", "they'd", "they'll", "they're",
        "they've", "this", "those", "through", "to", "too", "under", "until",
        "up", "very", "was", "wasn't", "we", "we'd", "we'll", "we're",
        "we've", "were", "weren't", "what", "what's", "when", "when's",
        "where", "where's", "which", "while", "who", "who's", "whom", "why",
        "why's", "with", "won't", "would", "wouldn't", "you", "you'd",
        "you'll", "you're", "you've", "your", "yours", "yourself",
        "yourselves",
    }
)


def trim(text: str | None) -> str:
    """Return ``text`` without surrounding whitespace (``None`` -> ``""``)."""
    if not text:
        return ""
    return text.strip()


def normalize_whitespace(text: str | None) -> str:
    """Collapse internal whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def remove_duplicates(values: Iterable[str | None]) -> list[str]:
    """Drop blanks and case-insensitive duplicates, keeping first-seen order.

    Survivors are returned trimmed but with their original casing.
    """
    seen: set[str] = set()
    result: list[str] = []

    for value in values:
        cleaned = trim(value)
        if not cleaned:
            continue

        key = cleaned.lower()
        if key in seen:
            continue

        seen.add(key)
        result.append(cleaned)

    return result


def strip_trailing_site_name(title: str | None) -> str:
    """Remove a short ``" - Site Name"`` / ``" | Site Name"`` suffix.

    Separators are tried in ``TITLE_SEPARATORS`` order. For each one present,
    the text after its last occurrence is treated as the publisher name and
    dropped when it is shorter than ``SITE_NAME_MAX_WORDS`` words; a longer
    tail moves on to the next separator. With no short tail the title is
    returned as-is.

    Examples:
        "Big Story - Daily News" -> "Big Story"
        "Storm hits - the coast tonight | Daily News" -> "Storm hits - the coast tonight"
        "Markets rally | Why investors are suddenly optimistic again" -> unchanged
    """
    if not title:
        return ""

    for separator in TITLE_SEPARATORS:
        if separator not in title:
            continue

        index = title.rfind(separator)
        tail = title[index + len(separator) :].strip(separator).strip()
        if len(tail.split()) < SITE_NAME_MAX_WORDS:
            logger.debug(f"Stripped site name '{tail}' from title")
            return title[:index]

    return title


def remove_stop_words(
    words: Iterable[str], stop_words: frozenset[str] = STOP_WORDS
) -> list[str]:
    """Return ``words`` minus any (case-insensitive) stop words, order kept."""
    return [word for word in words if word.lower() not in stop_words]


def is_valid_date(text: str | None, pattern: re.Pattern[str] = DATE_PATTERN) -> bool:
    """Loose publish-date check: true when ``text`` contains a YYYY-M-D run."""
    if not text:
        return False
    return pattern.search(text) is not None
