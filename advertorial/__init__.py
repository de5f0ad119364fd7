"""Advertorial backend: prompting, generation, post-processing and research."""

from .generator import ArticleGenerator
from .postprocessing import remove_oxford_comma
from .prompting import build_generation_prompt, build_tweak_prompt
from .research import NewsFetcher, render_articles
from .schemas import (
    Article,
    ContentResponse,
    GenerateRequest,
    ResearchRequest,
    TweakRequest,
)

__all__ = [
    "Article",
    "ArticleGenerator",
    "ContentResponse",
    "GenerateRequest",
    "NewsFetcher",
    "ResearchRequest",
    "TweakRequest",
    "build_generation_prompt",
    "build_tweak_prompt",
    "remove_oxford_comma",
    "render_articles",
]
