"""Google Gemini provider implementation."""

from google import genai
from google.genai import types

import gemmit.config as _config
from gemmit.config import API_KEY_ENV_VARS
from gemmit.llm.base import BaseLLMProvider
from gemmit.llm.exceptions import EmptyResponseError, LLMError

# Models that have built-in "thinking" which consumes output tokens
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

# Multiplier for max_output_tokens on thinking models
THINKING_TOKEN_MULTIPLIER = 3


class GoogleProvider(BaseLLMProvider):
    """Google Gemini text-generation provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Google provider.

        Args:
            model: The model to use. Defaults to the active configured model.
        """
        self.model = model or _config.ACTIVE_MODEL

    def get_api_key(self) -> str:
        """Get the Gemini API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If no key is found.
        """
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS, "Gemini")

    def _is_thinking_model(self) -> bool:
        return any(thinking_model in self.model.lower() for thinking_model in THINKING_MODELS)

    def generate(self, prompt: str) -> str:
        """Generate text for a prompt using Google Gemini.

        Args:
            prompt: The full prompt to send.

        Returns:
            The raw response text.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            EmptyResponseError: If Gemini returned no text.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()
        client = genai.Client(api_key=api_key)

        # Internal "thinking" consumes tokens from the output budget
        effective_max_tokens = _config.MAX_TOKENS
        if self._is_thinking_model():
            effective_max_tokens = _config.MAX_TOKENS * THINKING_TOKEN_MULTIPLIER

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=effective_max_tokens,
                    temperature=_config.TEMPERATURE,
                ),
            )
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        if not response.candidates:
            feedback = getattr(response, "prompt_feedback", None)
            if feedback:
                raise LLMError(f"Google Gemini returned no candidates: {feedback}")
            raise EmptyResponseError("Google Gemini returned no candidates in response")

        finish_reason = str(getattr(response.candidates[0], "finish_reason", "") or "")
        if "SAFETY" in finish_reason:
            raise LLMError(f"Google Gemini blocked response due to safety filters: {finish_reason}")

        raw_response = response.text
        if not raw_response or not raw_response.strip():
            raise EmptyResponseError("Google Gemini returned empty response")

        return raw_response
