"""LLM provider module for gemmit.

This module provides access to the Gemini text-generation provider.
The active model is configured in gemmit/config.py.
"""

from dotenv import load_dotenv

from gemmit.llm.base import BaseLLMProvider
from gemmit.llm.exceptions import (
    EmptyResponseError,
    LLMError,
    MissingAPIKeyError,
)
from gemmit.llm.parsing import ParsedSuggestions, ParseStatus, parse_suggestions
from gemmit.llm.prompts import build_suggestion_prompt

# Load environment variables from .env file
load_dotenv()


def get_provider(model: str | None = None) -> BaseLLMProvider:
    """Get a text-generation provider instance.

    Args:
        model: The model to use. Defaults to ACTIVE_MODEL from config.

    Returns:
        A configured GoogleProvider.
    """
    from gemmit.llm.google_provider import GoogleProvider

    return GoogleProvider(model=model)


__all__ = [
    "BaseLLMProvider",
    "EmptyResponseError",
    "LLMError",
    "MissingAPIKeyError",
    "ParseStatus",
    "ParsedSuggestions",
    "build_suggestion_prompt",
    "get_provider",
    "parse_suggestions",
]
