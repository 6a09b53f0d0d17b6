# SPDX-License-Identifier: Apache-2.0
"""Offline demo backend returning canned phrases."""

import asyncio

from pollyglot.core.models import Language

CANNED_TRANSLATIONS: dict[Language, str] = {
    Language.FRENCH: "Comment allez-vous?",
    Language.SPANISH: "¿Cómo estás?",
    Language.JAPANESE: "お元気ですか？",
}


class DemoTranslator:
    """Placeholder backend for running without credentials.

    Ignores the input text and answers "How are you?" in the target
    language after a simulated network delay.

    Attributes:
        name: Backend identifier ("demo").
    """

    def __init__(self, delay: float = 1.0) -> None:
        self._delay = delay

    @property
    def name(self) -> str:
        """Return backend name."""
        return "demo"

    async def translate(self, text: str, target_lang: Language) -> str:
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        return CANNED_TRANSLATIONS.get(target_lang, text)
