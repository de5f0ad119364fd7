"""Prompt templates for advertorial drafting, humanising and tweaking."""

from typing import Optional, Tuple

from advertorial.schemas import GenerateRequest

DRAFT_SYSTEM_PROMPT = """
You are a professional mining trade journalist writing Australian-style advertorials for a leading mining industry publication.

STRICT STYLE RULES:
- Do NOT use vague or cliched phrases (e.g. "in the ever-changing landscape", "revolutionising the sector", "game-changer", "cutting-edge").
- DO start articles with a clear, fact-based lead or concrete development, never abstract commentary.
- Follow Australian English conventions.
- Do NOT use the Oxford comma.
- Use ASX codes after first mention of companies (e.g. Rio Tinto (ASX: RIO)).
- Show AUD as $ (only use US$ or similar if needed).
- Abbreviate units with no space (e.g. 30km).
- Use sentence case for headings. Lowercase commodities, projects and mines.
- Job titles are lowercase unless political.
- Use varied sentence lengths and paragraph lengths.
- Keep contractions to a minimum (max 2).
- Use softening terms where appropriate (e.g. "can help", "typically", "likely").
- Avoid overly polished or robotic phrasing.
- Prioritise flow and readability. It is OK if writing feels slightly uneven or informal.
- Absolutely no corporate buzzwords or filler language.
""".strip()

HUMANISE_SYSTEM_PROMPT = (
    "You are an experienced human editor. Rewrite the following content to sound "
    "more like natural journalism written by an Australian editor."
)

TWEAK_SYSTEM_PROMPT = (
    "You are an experienced editor at an Australian mining trade publication. "
    "Revise the provided text according to the instruction. Keep Australian "
    "English, keep the existing facts and return only the revised text."
)


def _field(value: Optional[str]) -> str:
    return "" if value is None else value


def build_generation_prompt(item: GenerateRequest) -> Tuple[str, str]:
    """Return the (system, user) pair for the draft pass.

    Fields are interpolated verbatim in a fixed order; nothing is validated,
    escaped or truncated.
    """
    user = (
        f"Company: {_field(item.company_name)}\n"
        f"Product/Service: {_field(item.product_service)}\n"
        f"Key Points: {_field(item.key_points)}\n"
        f"Materials Provided: {_field(item.client_materials)}\n"
        f"Brief: {_field(item.brief)}\n"
        f"Content Type: {_field(item.content_type)}\n"
        f"Word Count: {_field(item.word_count)}"
    )
    return DRAFT_SYSTEM_PROMPT, user


def build_tweak_prompt(original: str, instruction: str) -> Tuple[str, str]:
    """Return the (system, user) pair for a single tweak revision."""
    user = f"Instruction: {instruction}\n\nOriginal text:\n{original}"
    return TWEAK_SYSTEM_PROMPT, user
