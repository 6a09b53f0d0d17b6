# SPDX-License-Identifier: Apache-2.0
"""OpenAI GPT translation backend."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from pollyglot.core.models import Language
from pollyglot.translators.base import MissingCredentialsError, TransportError

if TYPE_CHECKING:
    from openai import AsyncOpenAI


DEFAULT_SYSTEM_PROMPT = (
    "You are a professional translator. Translate the given text accurately "
    "while preserving the original meaning, tone, and formatting. "
    "Return only the translation without any explanations."
)


class OpenAITranslator:
    """OpenAI GPT translation backend.

    Uses Structured Outputs so the reply is always a single translation
    string. The API key is resolved at construction but only checked when
    a translation is requested, so an unconfigured deployment still
    reaches the request lifecycle and reports a configuration error.

    Attributes:
        name: Backend identifier ("openai").
    """

    DEFAULT_MODEL = "gpt-4o-mini"
    API_KEY_ENV_VAR = "OPENAI_API_KEY"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        system_prompt: str | None = None,
    ) -> None:
        """Initialize OpenAITranslator.

        Args:
            api_key: OpenAI API key. Falls back to OPENAI_API_KEY env.
            model: Model to use. Priority: argument > OPENAI_MODEL env > default.
            system_prompt: Custom system prompt for translation.

        Raises:
            ImportError: If openai package is not installed.
        """
        # Lazy import openai and pydantic
        try:
            from openai import AsyncOpenAI as _AsyncOpenAI

            self._AsyncOpenAI = _AsyncOpenAI
        except ImportError:
            raise ImportError(
                "openai is required for OpenAI backend. "
                "Install with: pip install pollyglot[openai]"
            ) from None

        try:
            from pydantic import BaseModel as _BaseModel

            class TranslationResult(_BaseModel):
                translation: str

            self._TranslationResult = TranslationResult
        except ImportError:
            raise ImportError(
                "pydantic is required for OpenAI backend. "
                "Install with: pip install pollyglot[openai]"
            ) from None

        self._api_key = api_key or os.environ.get(self.API_KEY_ENV_VAR, "")
        env_model = os.environ.get("OPENAI_MODEL")
        self._model = model or env_model or self.DEFAULT_MODEL
        self._system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
        self._client: AsyncOpenAI | None = None

    @property
    def name(self) -> str:
        """Return backend name."""
        return "openai"

    def _ensure_client(self) -> AsyncOpenAI:
        """Ensure OpenAI client exists.

        Returns:
            Active OpenAI async client.

        Raises:
            MissingCredentialsError: If no API key is available.
        """
        if not self._api_key:
            raise MissingCredentialsError(
                f"OpenAI API key is required (set {self.API_KEY_ENV_VAR})"
            )
        if self._client is None:
            self._client = self._AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def translate(self, text: str, target_lang: Language) -> str:
        """Translate a single text using OpenAI.

        Args:
            text: Text to translate.
            target_lang: Target language.

        Returns:
            Translated text.

        Raises:
            MissingCredentialsError: On missing or rejected API key.
            TransportError: On translation failure.
        """
        client = self._ensure_client()

        user_content = (
            f"Translate the following text to {target_lang.value}.\n\n"
            f"Text to translate:\n{text}"
        )

        try:
            response = await client.chat.completions.parse(
                model=self._model,
                messages=[
                    {"role": "system", "content": self._system_prompt},
                    {"role": "user", "content": user_content},
                ],
                response_format=self._TranslationResult,
                temperature=0.2,
            )
        except self._get_openai_errors() as e:
            self._handle_openai_error(e)
            raise  # Should not reach here

        if not response.choices:
            raise TransportError("OpenAI returned no choices")
        result = response.choices[0].message.parsed
        if result is None:
            raise TransportError("OpenAI returned empty response")

        translation: str = result.translation
        return translation

    def _get_openai_errors(self) -> tuple[type[Exception], ...]:
        """Get OpenAI exception types for error handling.

        Catches OpenAIError (base class) to handle all API errors including:
        - AuthenticationError
        - RateLimitError
        - BadRequestError
        - APIConnectionError
        - APITimeoutError

        Returns:
            Tuple of exception types to catch.
        """
        from openai import OpenAIError

        return (OpenAIError,)

    def _handle_openai_error(self, error: Any) -> None:
        """Handle OpenAI API errors.

        Args:
            error: The caught exception.

        Raises:
            MissingCredentialsError: On authentication or permission failure.
            TransportError: On other API errors.
        """
        from openai import AuthenticationError, PermissionDeniedError, RateLimitError

        if isinstance(error, AuthenticationError):
            raise MissingCredentialsError("Invalid OpenAI API key") from error
        elif isinstance(error, PermissionDeniedError):
            raise MissingCredentialsError(
                f"OpenAI API key cannot access model '{self._model}'"
            ) from error
        elif isinstance(error, RateLimitError):
            raise TransportError(
                "OpenAI rate limit exceeded, please retry later"
            ) from error

        raise TransportError(f"OpenAI API error: {error}") from error

    async def close(self) -> None:
        """Close the OpenAI client."""
        if self._client:
            await self._client.close()
            self._client = None
