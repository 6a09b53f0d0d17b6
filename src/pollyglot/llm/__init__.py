# SPDX-License-Identifier: Apache-2.0
"""LLM integration module for PollyGlot.

Provides provider-agnostic text generation through LiteLLM, used by the
``llm`` translation backend.

Requires optional dependency: litellm>=1.50.0
"""

from pollyglot.llm.client import LLMClient, LLMConfig

__all__ = [
    "LLMConfig",
    "LLMClient",
]
