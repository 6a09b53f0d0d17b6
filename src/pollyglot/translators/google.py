# SPDX-License-Identifier: Apache-2.0
"""Google Translate backend using deep-translator."""

import asyncio

from deep_translator import GoogleTranslator as DeepGoogleTranslator  # type: ignore[import-untyped]

from pollyglot.core.models import Language
from pollyglot.translators.base import TransportError


class GoogleTranslator:
    """Google Translate backend.

    This backend uses Google Translate via deep-translator library.
    No API key is required (uses free web API).

    Attributes:
        name: Backend identifier ("google").
    """

    @property
    def name(self) -> str:
        """Return backend name."""
        return "google"

    async def translate(self, text: str, target_lang: Language) -> str:
        """Translate a single text using Google Translate.

        Args:
            text: Text to translate.
            target_lang: Target language.

        Returns:
            Translated text.

        Raises:
            TransportError: On translation failure.
        """
        return await asyncio.to_thread(self._translate_sync, text, target_lang.code)

    def _translate_sync(self, text: str, target_code: str) -> str:
        """Synchronous translation implementation.

        Args:
            text: Text to translate.
            target_code: Target language code.

        Returns:
            Translated text.

        Raises:
            TransportError: On translation failure or an empty result.
        """
        try:
            translator = DeepGoogleTranslator(source="auto", target=target_code)
            result = translator.translate(text)
        except Exception as e:
            raise TransportError(f"Google Translate failed: {e}") from e
        if not result:
            raise TransportError("Google Translate returned empty response")
        return str(result)
