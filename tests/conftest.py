"""Shared pytest fixtures: fake OpenAI client and an API test client."""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from advertorial.generator import ArticleGenerator, get_generator
from advertorial.main import app
from advertorial.research import NewsFetcher, get_news_fetcher


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


@pytest.fixture
def openai_client() -> Mock:
    """Mock OpenAI client whose completions return queued texts in order."""
    client = Mock()
    client.chat.completions.create.side_effect = [
        make_completion("Draft about Rio Tinto, BHP, and Fortescue."),
        make_completion("Rio Tinto, BHP, and Fortescue signed on."),
    ]
    return client


@pytest.fixture
def generator(openai_client) -> ArticleGenerator:
    return ArticleGenerator(client=openai_client, model="test-model")


@pytest.fixture
def news_fetcher() -> Mock:
    return Mock(spec=NewsFetcher)


@pytest.fixture
def api_client(generator, news_fetcher):
    """TestClient with the provider handles replaced by fakes."""
    app.dependency_overrides[get_generator] = lambda: generator
    app.dependency_overrides[get_news_fetcher] = lambda: news_fetcher
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
