# SPDX-License-Identifier: Apache-2.0
"""LiteLLM translation backend (Gemini, Anthropic, OpenAI, ...)."""

from __future__ import annotations

import logging

from pollyglot.core.models import Language
from pollyglot.llm.client import LLMClient, LLMConfig
from pollyglot.translators.base import MissingCredentialsError, TransportError

logger = logging.getLogger(__name__)


class LLMTranslator:
    """Translation backend that prompts any LiteLLM-supported model.

    Attributes:
        name: Backend identifier ("llm").
    """

    SYSTEM_PROMPT = (
        "You are a professional translator. Translate the user's text "
        "accurately while preserving its meaning, tone, and formatting. "
        "Reply with the translation only."
    )

    TRANSLATION_PROMPT = "Translate the following text to {language}:\n\n{text}"

    def __init__(self, config: LLMConfig | None = None) -> None:
        """Initialize LLMTranslator.

        Args:
            config: LiteLLM provider configuration (default: Gemini).

        Raises:
            ImportError: If litellm is not installed.
        """
        try:
            import litellm as _litellm

            self._litellm = _litellm
        except ImportError:
            raise ImportError(
                "litellm is required for LLM backend. "
                "Install with: pip install pollyglot[llm]"
            ) from None

        self._client = LLMClient(config or LLMConfig())

    @property
    def name(self) -> str:
        """Return backend name."""
        return "llm"

    async def translate(self, text: str, target_lang: Language) -> str:
        """Translate a single text through LiteLLM.

        Raises:
            MissingCredentialsError: On missing or rejected provider key.
            TransportError: On any other provider failure.
        """
        config = self._client.config
        if not self._client.has_credentials():
            raise MissingCredentialsError(
                f"{config.provider} API key is required "
                f"(set {config.get_api_key_env_var()})"
            )

        prompt = self.TRANSLATION_PROMPT.format(language=target_lang.value, text=text)
        try:
            return await self._client.generate(prompt, system=self.SYSTEM_PROMPT)
        except self._litellm.AuthenticationError as e:
            raise MissingCredentialsError(
                f"{config.provider} rejected the API key"
            ) from e
        except Exception as e:
            raise TransportError(f"LLM request failed ({config.litellm_model}): {e}") from e
