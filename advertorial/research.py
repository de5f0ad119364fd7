"""News research: GNews search and HTML fragment rendering."""

from functools import lru_cache
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from pydantic import ValidationError

from advertorial.config import get_settings
from advertorial.errors import ConfigurationError, UpstreamServiceError
from advertorial.logging_utils import get_logger
from advertorial.schemas import Article

logger = get_logger(__name__)

GNEWS_SEARCH_URL = "https://gnews.io/api/v4/search"
DEFAULT_TOPIC = "mining"
MAX_RESULTS = 10
NO_ARTICLES_HTML = "<p>No recent articles found.</p>"


class NewsFetcher:
    """Searches recent Australian English-language news for a topic."""

    def __init__(self, api_key: str, timeout: float = 15.0):
        self.api_key = api_key
        self.timeout = timeout

    def search(self, topic: Optional[str] = None) -> List[Article]:
        """Return up to ten articles for `topic`, newest first."""
        if not self.api_key:
            raise ConfigurationError("News API key is not configured.")

        # An empty topic falls back to the default search.
        query = topic or DEFAULT_TOPIC
        params = {
            "q": query,
            "country": "au",
            "lang": "en",
            "max": MAX_RESULTS,
            "sortby": "publishedAt",
            "apikey": self.api_key,
        }
        try:
            resp = requests.get(GNEWS_SEARCH_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise UpstreamServiceError("gnews", str(exc)) from exc

        raw_articles = payload.get("articles") if isinstance(payload, dict) else None
        if not isinstance(raw_articles, list):
            raise UpstreamServiceError("gnews", "response has no article list")

        try:
            articles = [
                Article.model_validate(raw) for raw in raw_articles if isinstance(raw, dict)
            ]
        except ValidationError as exc:
            raise UpstreamServiceError("gnews", f"malformed article: {exc}") from exc
        logger.info("News search completed", topic=query, articles=len(articles))
        return articles


def render_articles(articles: List[Article]) -> str:
    """Render articles as an HTML fragment for the frontend research panel."""
    if not articles:
        return NO_ARTICLES_HTML

    soup = BeautifulSoup("", "html.parser")
    for article in articles:
        block = soup.new_tag("div", attrs={"class": "article"})

        heading = soup.new_tag("h3")
        heading.string = article.title or ""
        block.append(heading)

        summary = soup.new_tag("p")
        summary.string = article.description or ""
        block.append(summary)

        link = soup.new_tag(
            "a",
            href=article.url or "",
            target="_blank",
            rel="noopener noreferrer",
        )
        link.string = "Read more"
        block.append(link)

        if article.image:
            block.append(soup.new_tag("img", src=article.image, alt=article.title or ""))

        soup.append(block)
    return str(soup)


@lru_cache(maxsize=1)
def get_news_fetcher() -> NewsFetcher:
    """Return the process-wide news fetcher."""
    settings = get_settings()
    return NewsFetcher(api_key=settings.gnews_api_key, timeout=settings.news_timeout)
