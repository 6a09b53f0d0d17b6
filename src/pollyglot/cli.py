# SPDX-License-Identifier: Apache-2.0
"""
PollyGlot - CLI Tool

Translates a short text into French, Spanish or Japanese.

Usage:
    pollyglot <text> --language <language> [options]

Examples:
    pollyglot "How are you?" -l French               # OpenAI (default)
    pollyglot "How are you?" -l es --backend deepl
    echo "Good morning" | pollyglot - -l Japanese
    pollyglot "How are you?" -l fr --backend demo    # No API key needed
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn

from dotenv import load_dotenv

from pollyglot.controller import ControllerConfig, RequestController
from pollyglot.core.models import Failed, FormInput, Idle, Language, RequestState, Success
from pollyglot.llm.client import LLMConfig
from pollyglot.translators import BACKENDS, TranslatorBackend, create_translator

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="pollyglot",
        description="PollyGlot - Perfect Translation Every Time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "How are you?" -l French              # OpenAI (default)
  %(prog)s "How are you?" -l es -b deepl         # DeepL
  %(prog)s "How are you?" -l ja -b llm --provider gemini
  %(prog)s - -l French < note.txt                # Read text from stdin

Environment Variables:
  OPENAI_API_KEY   OpenAI API key (required for --backend openai)
  OPENAI_MODEL     OpenAI model override
  DEEPL_API_KEY    DeepL API key (required for --backend deepl)
  GEMINI_API_KEY   Gemini API key (for --backend llm --provider gemini)
""",
    )

    parser.add_argument(
        "text",
        help="Text to translate ('-' reads from stdin)",
    )
    parser.add_argument(
        "-l",
        "--language",
        help=f"Target language ({', '.join(lang.value for lang in Language)})",
    )
    parser.add_argument(
        "-b",
        "--backend",
        default="openai",
        choices=BACKENDS,
        help="Translation backend (default: openai)",
    )
    parser.add_argument(
        "--api-key",
        help="API key for the selected backend (or set its environment variable)",
    )
    parser.add_argument(
        "--model",
        help="Model override for the openai and llm backends",
    )
    parser.add_argument(
        "--provider",
        default="gemini",
        help="LiteLLM provider for --backend llm (default: gemini)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for the translation (default: no limit)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def create_backend(args: argparse.Namespace) -> TranslatorBackend:
    """Create translator based on backend selection.

    Missing API keys are not checked here; they surface as a
    configuration error when the translation is requested.
    """
    if args.backend == "openai":
        return create_translator("openai", api_key=args.api_key, model=args.model)
    elif args.backend == "deepl":
        return create_translator("deepl", api_key=args.api_key)
    elif args.backend == "llm":
        config = LLMConfig(provider=args.provider, model=args.model, api_key=args.api_key)
        return create_translator("llm", config=config)
    return create_translator(args.backend)


def render(state: RequestState) -> int:
    """Print the resolved state and return the exit code."""
    if isinstance(state, Success):
        print("Original text:")
        print(state.original_text)
        print()
        print("Your translation:")
        print(state.translated_text)
        return EXIT_SUCCESS

    if isinstance(state, Failed):
        print(f"Error: {state.error_message}", file=sys.stderr)
        return EXIT_FAILED

    if isinstance(state, Idle) and state.field_errors:
        for field_name, error in state.field_errors.items():
            print(f"Error: {field_name}: {error.message}", file=sys.stderr)
        return EXIT_INVALID

    logger.error("Translation did not resolve (state: %s)", state.tag.value)
    return EXIT_FAILED


async def run(args: argparse.Namespace) -> int:
    """Submit the form once and render the outcome.

    Returns:
        Exit code (0: success, 1: translation failure, 2: invalid input).
    """
    text = sys.stdin.read().rstrip("\r\n") if args.text == "-" else args.text

    try:
        translator = create_backend(args)
    except ImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED

    controller = RequestController(
        translator, ControllerConfig(request_timeout=args.timeout)
    )
    controller.subscribe(lambda state: logger.info("State: %s", state.tag.value))

    if args.verbose:
        print(f"Backend: {translator.name}", file=sys.stderr)

    try:
        state = await controller.submit(FormInput(text=text, target_language=args.language))
    finally:
        close = getattr(translator, "close", None)
        if close is not None:
            await close()

    return render(state)


def main() -> NoReturn:
    """Main entry point."""
    load_dotenv()
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
