"""Base class shared by text-generation providers."""

import os
from abc import ABC, abstractmethod

from gemmit.llm.exceptions import MissingAPIKeyError


class BaseLLMProvider(ABC):
    """Abstract base class for text-generation providers."""

    model: str

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Send a single prompt and return the raw response text.

        Args:
            prompt: The full prompt to send.

        Returns:
            The text produced by the model.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            EmptyResponseError: If the model returned no text.
            LLMError: For transport and other provider errors.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from environment or credentials file.

        Checks in order:
        1. Environment variables (including a loaded .env file)
        2. ~/.gemmit/credentials file

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        pass

    def _get_api_key_with_fallback(self, env_var_names: list[str], provider_name: str) -> str:
        """Helper to get API key with fallback to credentials file.

        Args:
            env_var_names: Environment variable names to check, in order.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        for name in env_var_names:
            api_key = os.getenv(name)
            if api_key:
                return api_key

        from gemmit.global_config import get_credential

        for name in env_var_names:
            api_key = get_credential(name)
            if api_key:
                return api_key

        primary = env_var_names[0]
        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {primary}=your_key_here\n"
            f"  2. A .env file in the current directory containing {primary}=...\n"
            f"  3. Run: gemmit config set-key"
        )
