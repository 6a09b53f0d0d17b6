# SPDX-License-Identifier: Apache-2.0
"""Translation backend modules.

This module provides translation backends for OpenAI, DeepL, Google
Translate, any LiteLLM-supported model, and an offline demo backend.

Google Translate and the demo backend are always available.
OpenAI, DeepL and LiteLLM require optional dependencies and API keys.

Usage:
    # Google Translate (always available)
    from pollyglot.translators import GoogleTranslator
    translator = GoogleTranslator()
    result = await translator.translate("Hello", Language.FRENCH)

    # OpenAI (requires openai package and OPENAI_API_KEY)
    from pollyglot.translators import get_openai_translator
    OpenAITranslator = get_openai_translator()
    translator = OpenAITranslator(api_key="your-api-key")

    # By name
    from pollyglot.translators import create_translator
    translator = create_translator("deepl", api_key="your-api-key")
"""

from typing import Any

from pollyglot.translators.base import (
    MissingCredentialsError,
    TransportError,
    TranslatorBackend,
    TranslatorError,
)
from pollyglot.translators.demo import DemoTranslator
from pollyglot.translators.google import GoogleTranslator

__all__ = [
    # Protocol and exceptions
    "TranslatorBackend",
    "TranslatorError",
    "TransportError",
    "MissingCredentialsError",
    # Always available
    "DemoTranslator",
    "GoogleTranslator",
    # Lazy import functions
    "BACKENDS",
    "create_translator",
    "get_deepl_translator",
    "get_llm_translator",
    "get_openai_translator",
]

BACKENDS = ("openai", "deepl", "google", "llm", "demo")


def get_deepl_translator() -> type:
    """Get DeepLTranslator class with lazy import.

    This function imports DeepLTranslator only when called,
    avoiding import errors when aiohttp is not installed.

    Returns:
        DeepLTranslator class.

    Raises:
        ImportError: If aiohttp is not installed.
    """
    from pollyglot.translators.deepl import DeepLTranslator

    return DeepLTranslator


def get_openai_translator() -> type:
    """Get OpenAITranslator class with lazy import.

    Returns:
        OpenAITranslator class.

    Raises:
        ImportError: If openai package is not installed.
    """
    from pollyglot.translators.openai import OpenAITranslator

    return OpenAITranslator


def get_llm_translator() -> type:
    """Get LLMTranslator class with lazy import.

    Returns:
        LLMTranslator class.
    """
    from pollyglot.translators.llm import LLMTranslator

    return LLMTranslator


def create_translator(backend: str, **options: Any) -> TranslatorBackend:
    """Create a translator backend by name.

    Args:
        backend: One of BACKENDS.
        **options: Constructor arguments for the selected backend.

    Returns:
        Translator instance.

    Raises:
        ValueError: If the backend name is unknown.
        ImportError: If the backend's optional dependency is missing.
    """
    if backend == "openai":
        translator: TranslatorBackend = get_openai_translator()(**options)
    elif backend == "deepl":
        translator = get_deepl_translator()(**options)
    elif backend == "llm":
        translator = get_llm_translator()(**options)
    elif backend == "google":
        translator = GoogleTranslator(**options)
    elif backend == "demo":
        translator = DemoTranslator(**options)
    else:
        raise ValueError(
            f"Unknown translation backend: {backend!r} (choose from {', '.join(BACKENDS)})"
        )
    return translator
