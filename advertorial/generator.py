"""Chat-completion wrapper and the two-stage advertorial pipeline.

The generator owns a single OpenAI client. `generate` runs a draft pass from
the structured request and then a humanising rewrite of that draft; `tweak`
runs one revision pass over caller-supplied text.
"""

from functools import lru_cache
from typing import Any

import openai
from openai import OpenAI

from advertorial.config import Settings, get_settings
from advertorial.errors import ConfigurationError, UpstreamServiceError
from advertorial.logging_utils import get_logger
from advertorial.postprocessing import remove_oxford_comma
from advertorial.prompting import (
    HUMANISE_SYSTEM_PROMPT,
    build_generation_prompt,
    build_tweak_prompt,
)
from advertorial.schemas import GenerateRequest

logger = get_logger(__name__)

DRAFT_TEMPERATURE = 0.85
HUMANISE_TEMPERATURE = 0.7
TWEAK_TEMPERATURE = 0.7
MAX_TOKENS = 1500


class ArticleGenerator:
    """Generates advertorial copy through an OpenAI chat model."""

    def __init__(self, client: Any, model: str = "gpt-4"):
        self.client = client
        self.model = model

    def _complete(
        self, system: str, user: str, temperature: float, stage: str
    ) -> str:
        """Run one chat completion and return the message text."""
        # No client means no API key was configured.
        if self.client is None:
            raise ConfigurationError("OpenAI API key is not configured.")

        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                temperature=temperature,
                max_tokens=MAX_TOKENS,
            )
        except openai.OpenAIError as exc:
            raise UpstreamServiceError("openai", f"{stage} call failed: {exc}") from exc

        # Tolerate odd response shapes; anything without text is a failed call.
        choices = getattr(completion, "choices", None)
        if not choices:
            raise UpstreamServiceError("openai", f"{stage} response has no choices")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise UpstreamServiceError("openai", f"{stage} response has no content")

        logger.debug("Completion received", stage=stage, chars=len(content))
        return content

    def draft(self, item: GenerateRequest) -> str:
        system, user = build_generation_prompt(item)
        return self._complete(system, user, DRAFT_TEMPERATURE, "draft")

    def humanise(self, draft_text: str) -> str:
        return self._complete(
            HUMANISE_SYSTEM_PROMPT, draft_text, HUMANISE_TEMPERATURE, "humanise"
        )

    def generate(self, item: GenerateRequest) -> str:
        """Draft, humanise and normalise an article.

        The humanise pass only starts once the draft is complete and receives
        the draft text verbatim. Either pass failing raises
        `UpstreamServiceError` and nothing is returned.
        """
        draft_text = self.draft(item)
        # The rewrite sees only the draft, never the original request fields.
        humanised = self.humanise(draft_text)
        logger.info(
            "Article generated",
            company=item.company_name,
            draft_chars=len(draft_text),
            final_chars=len(humanised),
        )
        return remove_oxford_comma(humanised)

    def tweak(self, original: str, instruction: str) -> str:
        """Revise `original` per `instruction`; the result is returned as-is."""
        system, user = build_tweak_prompt(original, instruction)
        return self._complete(system, user, TWEAK_TEMPERATURE, "tweak")


def build_generator(settings: Settings) -> ArticleGenerator:
    """Create a generator from settings.

    Without an API key the generator has no client and every call raises
    `ConfigurationError` before anything is sent.
    """
    if not settings.openai_api_key:
        return ArticleGenerator(client=None, model=settings.openai_model)
    # Retries are off so a provider failure surfaces on the first attempt.
    client = OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout,
        max_retries=0,
    )
    return ArticleGenerator(client=client, model=settings.openai_model)


@lru_cache(maxsize=1)
def get_generator() -> ArticleGenerator:
    """Return the process-wide generator, built on first use."""
    return build_generator(get_settings())
