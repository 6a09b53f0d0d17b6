# SPDX-License-Identifier: Apache-2.0
"""Base classes and protocols for translation backends."""

from typing import Protocol, runtime_checkable

from pollyglot.core.models import Language


class TranslatorError(Exception):
    """Base exception for translator module."""

    pass


class TransportError(TranslatorError):
    """Error reaching the service (network failure, rate limit, bad response, etc.).

    This error type is transient - the user may re-submit later.
    """

    pass


class MissingCredentialsError(TranslatorError):
    """The service is not usable as configured (no API key, key rejected).

    This error type is NOT transient - fix the configuration first.
    """

    pass


@runtime_checkable
class TranslatorBackend(Protocol):
    """Protocol definition for translation backends.

    All translator implementations must conform to this protocol.
    """

    @property
    def name(self) -> str:
        """Backend name ("openai", "deepl", "google", "llm", "demo")."""
        ...

    async def translate(self, text: str, target_lang: Language) -> str:
        """Translate a single text.

        Args:
            text: Text to translate.
            target_lang: Target language.

        Returns:
            Translated text.

        Raises:
            MissingCredentialsError: When the service is not configured.
            TransportError: On service or network failure.
        """
        ...
