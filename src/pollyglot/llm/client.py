# SPDX-License-Identifier: Apache-2.0
"""Chat completions through LiteLLM, shared by the llm translation backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import ClassVar

logger = logging.getLogger(__name__)


@dataclass
class LLMConfig:
    """Which LiteLLM provider and model translate the text.

    Attributes:
        provider: LiteLLM provider prefix ("gemini", "openai", "anthropic", ...).
        model: Model name within the provider; None picks the provider default.
        api_key: Explicit key; None reads the provider's environment variable.
        temperature: Sampling temperature. Kept low so translations stay literal.
    """

    provider: str = "gemini"
    model: str | None = None
    api_key: str | None = None
    temperature: float = 0.2

    DEFAULT_MODELS: ClassVar[dict[str, str]] = {
        "gemini": "gemini-2.0-flash",
        "openai": "gpt-4o-mini",
        "anthropic": "claude-3-5-haiku-latest",
    }

    KEY_ENV_VARS: ClassVar[dict[str, str]] = {
        "gemini": "GEMINI_API_KEY",
        "openai": "OPENAI_API_KEY",
        "anthropic": "ANTHROPIC_API_KEY",
    }

    @property
    def effective_model(self) -> str:
        """Model name with the provider default filled in."""
        return self.model or self.DEFAULT_MODELS.get(self.provider, "gemini-2.0-flash")

    @property
    def litellm_model(self) -> str:
        """"provider/model" string understood by LiteLLM."""
        return f"{self.provider}/{self.effective_model}"

    def get_api_key_env_var(self) -> str:
        """Environment variable holding the provider key."""
        return self.KEY_ENV_VARS.get(self.provider, f"{self.provider.upper()}_API_KEY")

    def resolve_api_key(self) -> str | None:
        """Explicit key, else the provider's environment variable."""
        return self.api_key or os.environ.get(self.get_api_key_env_var()) or None


class LLMClient:
    """Thin async wrapper over ``litellm.acompletion``."""

    def __init__(self, config: LLMConfig) -> None:
        self._config = config

    @property
    def config(self) -> LLMConfig:
        return self._config

    def has_credentials(self) -> bool:
        """True when a key for the configured provider is available."""
        return self._config.resolve_api_key() is not None

    async def generate(self, prompt: str, system: str | None = None) -> str:
        """Run one completion and return the reply text.

        Returns:
            The reply, or an empty string when the model sent no content.

        Raises:
            Exception: Whatever LiteLLM raises for provider errors.
        """
        from litellm import acompletion

        messages = [{"role": "user", "content": prompt}]
        if system:
            messages.insert(0, {"role": "system", "content": system})

        logger.debug("LiteLLM completion: model=%s", self._config.litellm_model)
        response = await acompletion(
            model=self._config.litellm_model,
            messages=messages,
            temperature=self._config.temperature,
            api_key=self._config.resolve_api_key(),
        )
        return response.choices[0].message.content or ""
