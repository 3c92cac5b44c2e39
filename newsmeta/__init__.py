"""newsmeta - structured metadata extraction for news article pages."""

__version__ = "0.1.0"
__license__ = "MIT"

from .crawler import ArticleParser, FetchError, extract_article
from .models import Article

__all__ = ["Article", "ArticleParser", "FetchError", "extract_article"]
