"""Pytest-wide fixtures for newsmeta tests."""

from __future__ import annotations

import pytest

from newsmeta import config


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Isolate tests from NEWSMETA_* variables set in the outer environment."""
    for key in (
        "NEWSMETA_TIMEOUT",
        "NEWSMETA_USER_AGENT",
        "NEWSMETA_LOG_LEVEL",
        "NEWSMETA_SNIPPET_LENGTH",
    ):
        monkeypatch.delenv(key, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def make_page():
    """Build a minimal HTML page from head and body fragments."""

    def _make_page(head: str = "", body: str = "") -> str:
        return f"<html><head>{head}</head><body>{body}</body></html>"

    return _make_page


@pytest.fixture
def full_article_html():
    """A realistic article page carrying every kind of signal."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>The PM's Comeback - Daily News</title>
        <meta property="og:title" content="The PM's Comeback | Daily News"/>
        <meta name="description" content="A look at the return of the former PM."/>
        <meta property="og:image" content="https://cdn.example.com/pm.jpg"/>
        <meta property="article:published_time" content="2024-06-03T05:00:00+10:00"/>
        <meta name="author" content="Jane Doe"/>
        <meta name="keywords" content="politics, PM, comeback, Politics, a"/>
        <script type="application/ld+json">
        {"@context": "https://schema.org", "@type": "WebPage", "name": "Daily News"}
        </script>
        <script type="application/ld+json">
        {
            "@context": "https://schema.org",
            "@type": "NewsArticle",
            "headline": "The PM's Comeback",
            "author": [{"@type": "Person", "name": "Jane Doe"},
                       {"@type": "Person", "name": "John Smith"}],
            "datePublished": "2024-06-03T05:00:00+10:00",
            "image": [{"@type": "ImageObject", "url": "https://cdn.example.com/ld.jpg"}]
        }
        </script>
    </head>
    <body>
        <h1>The PM's Comeback</h1>
        <div class="byline">
            <span class="author-name">By Jane Doe</span>
        </div>
        <a href="https://example.com/author/john-smith">John Smith</a>
        <time datetime="2024-06-03">June 3</time>
        <p>Article body.</p>
    </body>
    </html>
    """
