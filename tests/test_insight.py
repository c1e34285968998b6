import pytest

from analysis import InsightRequester, InsightUnavailable, build_prompt, strip_bold_markers
from conftest import FakeGenerator


def test_prompt_embeds_readings_and_score(readings):
    prompt = build_prompt(readings, score=67)
    assert "• Glucose Zone: Moderate blue" in prompt
    assert "• pH Zone: Neutral green" in prompt
    assert "• Cortisol Zone: Faint" in prompt
    assert "• Salt Zone: Moderate" in prompt
    assert "Estimated PCOS Risk Score: 67%" in prompt
    assert prompt.startswith("You're a health AI")


def test_prompt_without_score(readings):
    assert "Risk Score" not in build_prompt(readings)


@pytest.mark.parametrize("text,expected", [
    ("plain text", "plain text"),
    ("**bold**", "bold"),
    ("**a** and **b** ** c", "a and b  c"),
    ("***", "*"),
])
def test_strip_bold_markers(text, expected):
    assert strip_bold_markers(text) == expected


def test_request_insight_strips_markers(requester, generator, readings):
    assert requester.request_insight(readings, 67) == "Great news, keep hydrated."
    assert len(generator.prompts) == 1
    assert "67%" in generator.prompts[0]


def test_provider_failure_raises_insight_unavailable(readings):
    requester = InsightRequester(FakeGenerator(error=ConnectionError("quota exceeded")))
    with pytest.raises(InsightUnavailable, match="quota exceeded"):
        requester.request_insight(readings)


@pytest.mark.parametrize("reply", ["", "   ", None])
def test_empty_reply_is_unavailable(readings, reply):
    requester = InsightRequester(FakeGenerator(reply=reply))
    with pytest.raises(InsightUnavailable):
        requester.request_insight(readings)
