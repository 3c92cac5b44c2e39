"""Fetch article pages and assemble extracted metadata into ``Article`` records."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

import requests
from bs4 import BeautifulSoup

from newsmeta.config import Settings, get_settings
from newsmeta.metadata import (
    StructuredArticleData,
    extract_authors,
    extract_description,
    extract_full_text,
    extract_image,
    extract_keywords,
    extract_published_date,
    extract_title,
    locate_structured_data,
)
from newsmeta.metadata.document import parse_document
from newsmeta.models import RAW_HTML_SNIPPET_LENGTH, Article
from newsmeta.utils.text_normalizer import strip_trailing_site_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FetchError(Exception):
    """Exception raised when a page cannot be fetched."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class NotFoundError(FetchError):
    """Exception raised when a URL returns 404/410 (permanent missing)."""

    pass


class RateLimitError(FetchError):
    """Exception raised when a domain responds with 429."""

    pass


@dataclass(frozen=True)
class FetchResult:
    """Successful HTTP response for an article page."""

    url: str
    final_url: str
    status_code: int
    content: bytes
    text: str


class NewsFetcher:
    """Fetch article pages over HTTP with a cookie-keeping session."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.timeout
        self.user_agent = user_agent or settings.user_agent
        # requests.Session keeps a cookie jar across redirects and requests
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": (
                    "text/html,application/xhtml+xml,"
                    "application/xml;q=0.9,*/*;q=0.8"
                ),
            }
        )

    def fetch(self, url: str) -> FetchResult:
        """GET ``url`` and return the response body and final URL.

        Raises:
            NotFoundError: 404 or 410 response
            RateLimitError: 429 response
            FetchError: network failure or any other non-200 status
        """
        logger.debug(f"Fetching: {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}", url) from e

        status = resp.status_code
        if status in (404, 410):
            raise NotFoundError(f"URL not found ({status}): {url}", url, status)
        if status == 429:
            raise RateLimitError(f"Rate limited (429) fetching {url}", url, status)
        if status != 200:
            raise FetchError(
                f"HTTP error fetching {url}: status code {status}", url, status
            )

        final_url = resp.url or url
        if final_url != url:
            logger.info(f"Redirected {url} -> {final_url}")

        return FetchResult(
            url=url,
            final_url=final_url,
            status_code=status,
            content=resp.content,
            text=resp.text,
        )


def _decode_body(document_body: Any) -> str:
    if document_body is None:
        return ""
    if isinstance(document_body, bytes):
        return document_body.decode("utf-8", errors="replace")
    return str(document_body)


def _guarded(
    name: str,
    extractor: Callable[[BeautifulSoup, Optional[StructuredArticleData]], T],
    document: BeautifulSoup,
    structured_data: Optional[StructuredArticleData],
    default: T,
) -> T:
    try:
        return extractor(document, structured_data)
    except Exception:
        logger.exception(f"{name} extractor failed; using empty value")
        return default


def extract_article(
    url: str,
    document_body: Any,
    final_url: Optional[str] = None,
    snippet_length: int = RAW_HTML_SNIPPET_LENGTH,
) -> Article:
    """Extract article metadata from already-fetched markup.

    Args:
        url: Requested URL
        document_body: Page markup (``str`` or ``bytes``)
        final_url: URL after redirects; defaults to ``url``
        snippet_length: Length of the ``raw_html`` diagnostic snippet (max 100)

    Returns:
        Article record; never raises for missing or malformed metadata
    """
    raw_html = _decode_body(document_body).strip()

    try:
        document = parse_document(raw_html)
    except Exception:
        logger.exception(f"Error parsing HTML for {url}")
        document = parse_document("")

    try:
        structured_data, found = locate_structured_data(document)
    except Exception:
        logger.exception(f"Structured data lookup failed for {url}")
        structured_data, found = None, False
    logger.debug(f"NewsArticle JSON-LD {'found' if found else 'not found'} for {url}")

    title = _guarded("title", extract_title, document, structured_data, "")
    authors = _guarded("authors", extract_authors, document, structured_data, [])
    description = _guarded(
        "description", extract_description, document, structured_data, ""
    )
    full_text = _guarded("full_text", extract_full_text, document, structured_data, "")
    published_date = _guarded(
        "published_date", extract_published_date, document, structured_data, ""
    )
    image = _guarded("image", extract_image, document, structured_data, "")
    keywords = _guarded("keywords", extract_keywords, document, structured_data, [])

    snippet_length = max(0, min(snippet_length, RAW_HTML_SNIPPET_LENGTH))

    return Article(
        title=strip_trailing_site_name(title),
        url=final_url or url,
        authors=tuple(authors),
        description=description,
        full_text=full_text,
        published_date=published_date,
        image=image,
        keywords=tuple(keywords),
        raw_html=raw_html[:snippet_length],
    )


class ArticleParser:
    """Fetch a URL and extract its article metadata."""

    def __init__(
        self,
        fetcher: Optional[NewsFetcher] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.fetcher = fetcher or NewsFetcher(
            timeout=self.settings.timeout, user_agent=self.settings.user_agent
        )

    def parse_html(self, html: Any, url: str, final_url: Optional[str] = None) -> Article:
        return extract_article(
            url, html, final_url, snippet_length=self.settings.snippet_length
        )

    def parse(self, url: str) -> Article:
        """Fetch ``url`` and extract its metadata.

        Raises:
            FetchError: when the page cannot be retrieved
        """
        result = self.fetcher.fetch(url)
        logger.info(f"Fetched {len(result.content)} bytes from {result.final_url}")
        return self.parse_html(result.text, url, result.final_url)


__all__ = [
    "ArticleParser",
    "FetchError",
    "FetchResult",
    "NewsFetcher",
    "NotFoundError",
    "RateLimitError",
    "extract_article",
]
