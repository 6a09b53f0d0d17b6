# SPDX-License-Identifier: Apache-2.0
"""DeepL translation backend."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from pollyglot.core.models import Language
from pollyglot.translators.base import MissingCredentialsError, TransportError

if TYPE_CHECKING:
    import aiohttp


class DeepLTranslator:
    """DeepL translation backend.

    This backend uses DeepL API for high-quality translation.
    Requires an API key (free or pro).

    Attributes:
        name: Backend identifier ("deepl").
    """

    DEFAULT_API_URL = "https://api-free.deepl.com/v2/translate"
    API_KEY_ENV_VAR = "DEEPL_API_KEY"

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
    ) -> None:
        """Initialize DeepLTranslator.

        Args:
            api_key: DeepL API key. Falls back to DEEPL_API_KEY env.
            api_url: API URL. Falls back to DEEPL_API_URL env, then the free endpoint.

        Raises:
            ImportError: If aiohttp is not installed.
        """
        # Lazy import aiohttp
        try:
            import aiohttp as _aiohttp

            self._aiohttp = _aiohttp
        except ImportError:
            raise ImportError(
                "aiohttp is required for DeepL backend. "
                "Install with: pip install pollyglot[deepl]"
            ) from None

        self._api_key = api_key or os.environ.get(self.API_KEY_ENV_VAR, "")
        self._api_url = api_url or os.environ.get("DEEPL_API_URL") or self.DEFAULT_API_URL
        self._session: aiohttp.ClientSession | None = None

    @property
    def name(self) -> str:
        """Return backend name."""
        return "deepl"

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = self._aiohttp.ClientSession()
        return self._session

    async def translate(self, text: str, target_lang: Language) -> str:
        """Translate a single text using DeepL.

        Args:
            text: Text to translate.
            target_lang: Target language.

        Returns:
            Translated text.

        Raises:
            MissingCredentialsError: On missing or rejected API key.
            TransportError: On translation failure.
        """
        if not self._api_key:
            raise MissingCredentialsError(
                f"DeepL API key is required (set {self.API_KEY_ENV_VAR})"
            )

        session = await self._ensure_session()

        # DeepL auto-detects the source language when source_lang is omitted
        params: list[tuple[str, str]] = [
            ("text", text),
            ("target_lang", target_lang.code.upper()),
        ]
        headers = {"Authorization": f"DeepL-Auth-Key {self._api_key}"}

        try:
            async with session.post(self._api_url, data=params, headers=headers) as response:
                if response.status == 200:
                    return self._parse_response(await response.json())
                elif response.status == 403:
                    raise MissingCredentialsError("Invalid DeepL API key")
                elif response.status == 429:
                    raise TransportError(
                        "DeepL rate limit exceeded, please retry later"
                    )
                elif response.status >= 500:
                    raise TransportError(
                        f"DeepL server error (status {response.status})"
                    )
                else:
                    error_text = await response.text()
                    raise TransportError(
                        f"DeepL API error (status {response.status}): {error_text}"
                    )
        except self._aiohttp.ClientError as e:
            raise TransportError(f"DeepL request failed: {e}") from e

    def _parse_response(self, data: Any) -> str:
        """Extract the translated text from a DeepL response body.

        Raises:
            TransportError: If the body does not hold exactly one translation.
        """
        try:
            translations = [t["text"] for t in data["translations"]]
        except (KeyError, TypeError) as e:
            raise TransportError(f"Malformed DeepL response: {data!r}") from e
        if len(translations) != 1:
            raise TransportError(
                f"DeepL returned {len(translations)} translations for 1 text"
            )
        return translations[0]

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
