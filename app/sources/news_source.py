"""
News search integration backed by NewsAPI.
"""

from typing import Dict, Any, List
import logging

from app.sources.base_source import BaseSource, SourceError
from app.schemas.aggregate import NewsArticleRecord

logger = logging.getLogger(__name__)

MAX_ARTICLES = 5


def parse_articles(data: Any, limit: int = MAX_ARTICLES) -> List[NewsArticleRecord]:
    """
    Process and normalize NewsAPI articles.

    Args:
        data: Decoded ``/v2/everything`` response body
        limit: Maximum number of articles to keep

    Returns:
        List of NewsArticleRecord, at most ``limit`` long

    Raises:
        SourceError: If the API reported an error or the body is malformed
    """
    if not isinstance(data, dict):
        raise SourceError(NewsSource.name, "malformed response: expected an object")

    if data.get("status") == "error":
        raise SourceError(NewsSource.name, f"API error {data.get('code')}: {data.get('message')}")

    articles = data.get("articles") or []
    if not isinstance(articles, list):
        raise SourceError(NewsSource.name, "malformed response: articles is not a list")

    processed = []

    try:
        for article in articles[:min(limit, MAX_ARTICLES)]:
            if not isinstance(article, dict):
                continue
            processed.append(NewsArticleRecord(
                title=article.get("title") or "No title",
                image=article.get("urlToImage") or None,
                description=article.get("description") or "No description available",
                source_url=article.get("url") or "#"
            ))
    except (TypeError, AttributeError, ValueError) as e:
        raise SourceError(NewsSource.name, f"malformed response: {e!r}") from e

    return processed


class NewsSource(BaseSource):
    """Full-text news search using NewsAPI"""

    name = "newsapi"

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize news search.

        Args:
            config: Configuration dictionary with news_api_key and search settings
        """
        super().__init__(config)
        self.api_key = config.get('news_api_key') or ""
        self.language = config.get('language', 'en')
        self.page_size = min(config.get('page_size', MAX_ARTICLES), MAX_ARTICLES)
        if not self.api_key:
            logger.warning("News source initialized without API key. News will be empty")

    async def search(self, query: str, **kwargs) -> List[NewsArticleRecord]:
        """
        Search news articles.

        Args:
            query: Free-text search term, e.g. a country name
            **kwargs: Additional search parameters
                - language: Override default language filter
                - page_size: Override default result cap (never above 5)

        Returns:
            List of NewsArticleRecord

        Raises:
            SourceError: If the request fails or the body is unusable
        """
        page_size = min(kwargs.get('page_size', self.page_size), MAX_ARTICLES)

        logger.info(f"Searching news for: {query}")
        data = await self._get_json(
            "/v2/everything",
            params={
                "q": query,
                "language": kwargs.get('language', self.language),
                "pageSize": page_size,
                "apiKey": self.api_key
            }
        )

        articles = parse_articles(data, limit=page_size)
        logger.info(f"Found {len(articles)} articles for query: {query}")
        return articles
