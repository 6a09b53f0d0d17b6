#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""PollyGlot sample script

Shows how a presentation layer drives RequestController: subscribe to
state changes, submit the form, then reset for another translation.
Edit the settings below to try different backends and inputs.

Usage:
    cd examples
    python translate_text.py

Environment variables (loaded from .env automatically):
    OPENAI_API_KEY: required for the openai backend
    DEEPL_API_KEY: required for the deepl backend
    OPENAI_MODEL: OpenAI model override (default: gpt-4o-mini)
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add the project to the path (for development)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

# Backend: "openai" | "deepl" | "google" | "llm" | "demo"
# - demo: no API key, canned answers after a one second delay
TRANSLATOR = "demo"

TEXT = "How are you?"

# "French" | "Spanish" | "Japanese" (None shows the validation error)
LANGUAGE: str | None = "French"

# Seconds to wait for the backend (None waits forever)
REQUEST_TIMEOUT: float | None = 30.0


# =============================================================================


async def main() -> int:
    from pollyglot.controller import ControllerConfig, RequestController
    from pollyglot.core.models import Failed, FormInput, Idle, RequestState, Success
    from pollyglot.translators import create_translator

    def show(state: RequestState) -> None:
        if isinstance(state, Success):
            print(f"  [success] {state.original_text!r} -> {state.translated_text!r}")
        elif isinstance(state, Failed):
            print(f"  [failed] {state.error_message} ({state.error_kind.value})")
        elif isinstance(state, Idle) and state.field_errors:
            for name, error in state.field_errors.items():
                print(f"  [invalid] {name}: {error.message}")
        else:
            print(f"  [{state.tag.value}]")

    controller = RequestController(
        create_translator(TRANSLATOR),
        ControllerConfig(request_timeout=REQUEST_TIMEOUT),
    )
    controller.subscribe(show)

    print(f"Backend: {TRANSLATOR}")
    state = await controller.submit(FormInput(text=TEXT, target_language=LANGUAGE))

    print("Start over:")
    controller.reset()
    return 0 if isinstance(state, Success) else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
