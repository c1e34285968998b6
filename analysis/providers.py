"""
Text generation backends for sweat-analysis insights.

Each builder returns a ``generate(prompt) -> str`` callable that raises on
failure. Gemini is the default; Groq and OpenAI are kept as alternatives and
selected with INSIGHT_PROVIDER.
"""
import logging
from typing import Callable, Optional

import google.generativeai as genai
from groq import Groq
from openai import OpenAI

from config import Config

logger = logging.getLogger(__name__)

Generator = Callable[[str], str]


def build_gemini_generator(api_key: Optional[str], model: str) -> Generator:
    if not api_key:
        raise RuntimeError("Gemini not configured (set GEMINI_API_KEY)")
    genai.configure(api_key=api_key)
    gemini_model = genai.GenerativeModel(model)

    def generate(prompt: str) -> str:
        response = gemini_model.generate_content([prompt])
        return response.text

    return generate


def build_groq_generator(api_key: Optional[str], model: str,
                         temperature: float = 0.7, max_tokens: int = 1000) -> Generator:
    if not api_key:
        raise RuntimeError("Groq not configured (set GROQ_API_KEY)")
    groq_client = Groq(api_key=api_key)

    def generate(prompt: str) -> str:
        response = groq_client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.choices[0].message.content

    return generate


def build_openai_generator(api_key: Optional[str], model: str,
                           temperature: float = 0.7, max_tokens: int = 1000) -> Generator:
    if not api_key:
        raise RuntimeError("OpenAI not configured (set OPENAI_API_KEY)")
    openai_client = OpenAI(api_key=api_key)

    def generate(prompt: str) -> str:
        resp = openai_client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return resp.choices[0].message.content

    return generate


def build_generator(config=Config) -> Generator:
    provider = (config.INSIGHT_PROVIDER or "gemini").lower()
    if provider == "gemini":
        gen = build_gemini_generator(config.GEMINI_API_KEY, config.GEMINI_MODEL)
    elif provider == "groq":
        gen = build_groq_generator(config.GROQ_API_KEY, config.GROQ_MODEL,
                                   config.INSIGHT_TEMPERATURE, config.INSIGHT_MAX_TOKENS)
    elif provider == "openai":
        gen = build_openai_generator(config.OPENAI_API_KEY, config.OPENAI_MODEL,
                                     config.INSIGHT_TEMPERATURE, config.INSIGHT_MAX_TOKENS)
    else:
        raise ValueError(f"Unknown INSIGHT_PROVIDER: {provider}")
    logger.info("Insight provider configured: %s", provider)
    return gen
