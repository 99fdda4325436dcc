"""Language-understanding client backed by an OpenAI-compatible API.

Security: Reads API key from environment only, never hardcoded.
The default endpoint is xAI's OpenAI-compatible API running Grok.
"""

import logging
from typing import Protocol

from openai import AsyncOpenAI, OpenAIError

from backend.daytrip.config import get_settings
from backend.daytrip.errors import LanguageServiceError

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    """Protocol for language-understanding client implementations."""

    async def complete(self, *, system: str, prompt: str) -> str:
        """Send one instruction + prompt pair and return the reply text.

        Args:
            system: Fixed system instruction
            prompt: Raw user prompt

        Returns:
            Reply text, never empty

        Raises:
            LanguageServiceError: On any failure to obtain a reply
        """
        ...


class UnconfiguredClient:
    """Client used when no API key is configured; every call fails."""

    async def complete(self, *, system: str, prompt: str) -> str:
        raise LanguageServiceError("Language service is not configured (XAI_API_KEY unset)")


class OpenAIClient:
    """OpenAI SDK client pointed at an OpenAI-compatible endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = "grok-3",
        base_url: str | None = None,
        temperature: float = 0.0,
    ):
        """Initialize client.

        Args:
            api_key: Provider API key (read from environment)
            model: Chat model name
            base_url: API root; None means api.openai.com
            temperature: Sampling temperature (0 keeps extraction stable)
        """
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.temperature = temperature

    async def complete(self, *, system: str, prompt: str) -> str:
        """Single chat completion; no retry."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.error(f"Language service call failed: {e}")
            raise LanguageServiceError(f"Language service call failed: {type(e).__name__}") from e

        if not response.choices:
            raise LanguageServiceError("Language service returned no choices")

        text = response.choices[0].message.content or ""
        if not text.strip():
            logger.warning("Language service returned empty response")
            raise LanguageServiceError("Language service returned an empty reply")

        return text


async def get_llm_client() -> LLMClient:
    """Factory function to get appropriate LLM client based on config.

    Returns:
        OpenAIClient if API key is configured, UnconfiguredClient otherwise
    """
    settings = get_settings()
    api_key = settings.xai_api_key

    if api_key and api_key.get_secret_value():
        logger.info(f"Using {settings.llm_model} for intent extraction")
        return OpenAIClient(
            api_key=api_key.get_secret_value(),
            model=settings.llm_model,
            base_url=settings.llm_base_url,
            temperature=settings.llm_temperature,
        )
    else:
        logger.warning("No XAI_API_KEY configured, intent extraction will fail")
        return UnconfiguredClient()
