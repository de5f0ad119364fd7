"""FastAPI application entrypoint for advertorial generation and research."""

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from advertorial.config import get_settings
from advertorial.errors import ConfigurationError, UpstreamServiceError
from advertorial.generator import ArticleGenerator, get_generator
from advertorial.logging_utils import get_logger, setup_logging
from advertorial.research import NewsFetcher, get_news_fetcher, render_articles
from advertorial.schemas import (
    ContentResponse,
    GenerateRequest,
    ResearchRequest,
    TweakRequest,
)

settings = get_settings()
setup_logging(level=settings.log_level, log_format=settings.log_format)
logger = get_logger(__name__)

app = FastAPI(title="Advertorial Backend", version="1.0.0")

# The allow-list differs between production and local development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Report a missing credential; raised before any provider is contacted."""
    logger.error("Configuration error", path=request.url.path, error=str(exc))
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/", response_class=PlainTextResponse)
def index():
    return "Advertorial backend is running."


@app.get("/health")
def health_check():
    """Return service liveness and the configured generation model."""
    return {"status": "ok", "model": get_settings().openai_model}


@app.post("/generate", response_model=ContentResponse)
def generate_content(
    payload: GenerateRequest,
    generator: ArticleGenerator = Depends(get_generator),
):
    """Draft an advertorial, humanise it and strip Oxford commas."""
    # Both passes run inside the generator; a failure in either aborts the request.
    try:
        content = generator.generate(payload)
    except UpstreamServiceError as exc:
        logger.error("Content generation failed", service=exc.service, error=exc.message)
        return PlainTextResponse("Error generating content.", status_code=500)
    return ContentResponse(content=content)


@app.post("/research", response_model=ContentResponse)
def research_topic(
    payload: ResearchRequest,
    fetcher: NewsFetcher = Depends(get_news_fetcher),
):
    """Return recent Australian news on a topic as an HTML fragment."""
    # A missing news key raises ConfigurationError, handled app-wide.
    try:
        articles = fetcher.search(payload.topic)
    except UpstreamServiceError as exc:
        logger.error(
            "News research failed",
            topic=payload.topic,
            service=exc.service,
            error=exc.message,
        )
        return PlainTextResponse("Error fetching research.", status_code=500)
    return ContentResponse(content=render_articles(articles))


@app.post("/tweak", response_model=ContentResponse)
def tweak_content(
    payload: TweakRequest,
    generator: ArticleGenerator = Depends(get_generator),
):
    """Revise existing text according to a free-form instruction."""
    # Reject incomplete input before any provider is contacted.
    if not payload.original or not payload.instruction:
        logger.warning(
            "Rejecting tweak request: missing input",
            has_original=bool(payload.original),
            has_instruction=bool(payload.instruction),
        )
        return PlainTextResponse("Missing original text or instruction.", status_code=400)

    try:
        content = generator.tweak(payload.original, payload.instruction)
    except UpstreamServiceError as exc:
        logger.error("Tweak failed", service=exc.service, error=exc.message)
        return PlainTextResponse("Error applying tweak.", status_code=500)
    # Tweak output is returned without comma normalisation.
    return ContentResponse(content=content)


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    logger.info(
        "Advertorial backend starting",
        url=f"http://localhost:{settings.port}",
        environment=settings.app_env,
        allowed_origins=settings.allowed_origins,
    )
    uvicorn.run(
        "advertorial.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    run()
