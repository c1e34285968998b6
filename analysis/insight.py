import logging
from typing import Callable, Optional

from .errors import InsightUnavailable

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """
You're a health AI helping young women detect early PCOS indicators via sweat-based test strips.

User submitted:
• Glucose Zone: {glucose}
• pH Zone: {ph}
• Cortisol Zone: {cortisol}
• Salt Zone: {salt}
{score_line}
Give a detailed analysis of what this may mean. Then suggest 4-5 personalized tips (lifestyle or diet). Make it friendly and encouraging.
"""


def build_prompt(readings, score: Optional[int] = None) -> str:
    score_line = f"• Estimated PCOS Risk Score: {score}%\n" if score is not None else ""
    return PROMPT_TEMPLATE.format(
        glucose=readings.glucose,
        ph=readings.ph,
        cortisol=readings.cortisol,
        salt=readings.salt,
        score_line=score_line,
    ).strip()


def strip_bold_markers(text: str) -> str:
    return text.replace("**", "")


class InsightRequester:
    """Turns strip readings into AI-written guidance via a text generator."""

    def __init__(self, generate: Callable[[str], str]):
        self._generate = generate

    def request_insight(self, readings, score: Optional[int] = None) -> str:
        prompt = build_prompt(readings, score)
        try:
            text = self._generate(prompt)
        except Exception as e:
            logger.error("Analysis error: %s", e)
            raise InsightUnavailable(str(e)) from e
        if not isinstance(text, str) or not text.strip():
            raise InsightUnavailable("empty response from insight provider")
        return strip_bold_markers(text)
