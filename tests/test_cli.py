# SPDX-License-Identifier: Apache-2.0
"""Tests for the command line interface."""

from __future__ import annotations

import io
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pollyglot.cli import (
    EXIT_FAILED,
    EXIT_INVALID,
    EXIT_SUCCESS,
    create_backend,
    parse_args,
    render,
    run,
)
from pollyglot.core.models import (
    ErrorKind,
    Failed,
    FieldError,
    FieldErrorCode,
    FormInput,
    Idle,
    Language,
    Success,
)
from pollyglot.translators import DemoTranslator, MissingCredentialsError


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self) -> None:
        """Test default option values."""
        args = parse_args(["Hello"])

        assert args.text == "Hello"
        assert args.language is None
        assert args.backend == "openai"
        assert args.provider == "gemini"
        assert args.timeout is None
        assert args.verbose is False

    def test_options(self) -> None:
        """Test language, backend and timeout options."""
        args = parse_args(["Hello", "-l", "fr", "-b", "demo", "--timeout", "2.5", "-v"])

        assert args.language == "fr"
        assert args.backend == "demo"
        assert args.timeout == 2.5
        assert args.verbose is True

    def test_unknown_backend(self) -> None:
        """Unknown backends are rejected by argparse."""
        with pytest.raises(SystemExit):
            parse_args(["Hello", "-b", "babelfish"])


class TestCreateBackend:
    """Tests for create_backend."""

    def test_demo(self) -> None:
        """demo backend needs no key."""
        assert isinstance(create_backend(parse_args(["Hi", "-b", "demo"])), DemoTranslator)

    def test_llm_provider(self) -> None:
        """llm backend receives the provider configuration."""
        with patch("pollyglot.cli.create_translator") as create:
            create_backend(parse_args(["Hi", "-b", "llm", "--provider", "anthropic"]))

        _, kwargs = create.call_args
        assert kwargs["config"].provider == "anthropic"

    def test_openai_key_and_model(self) -> None:
        """openai backend receives the key and model."""
        with patch("pollyglot.cli.create_translator") as create:
            create_backend(parse_args(["Hi", "--api-key", "k", "--model", "gpt-4o"]))

        create.assert_called_once_with("openai", api_key="k", model="gpt-4o")


class TestRender:
    """Tests for rendering resolved states."""

    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Success prints original and translation."""
        code = render(Success("Hello", "Bonjour", Language.FRENCH))

        out = capsys.readouterr().out
        assert code == EXIT_SUCCESS
        assert "Original text:\nHello" in out
        assert "Your translation:\nBonjour" in out

    def test_failed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Failed prints the user message to stderr."""
        code = render(
            Failed(
                "Hello",
                "Translation failed. Please try again later.",
                ErrorKind.TRANSPORT_FAILURE,
                FormInput(text="Hello", target_language="fr"),
            )
        )

        assert code == EXIT_FAILED
        assert "Please try again later" in capsys.readouterr().err

    def test_field_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Field errors print one line per field."""
        state = Idle(
            field_errors={
                "language": FieldError(
                    FieldErrorCode.NO_LANGUAGE_SELECTED, "Please select a language."
                )
            }
        )

        code = render(state)

        assert code == EXIT_INVALID
        assert "Error: language: Please select a language." in capsys.readouterr().err


class TestRun:
    """Tests for run()."""

    async def test_demo_translation(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The demo backend translates without credentials."""
        args = parse_args(["How are you?", "-l", "Spanish", "-b", "demo"])

        with patch("pollyglot.cli.create_backend", return_value=DemoTranslator(delay=0)):
            code = await run(args)

        assert code == EXIT_SUCCESS
        assert "¿Cómo estás?" in capsys.readouterr().out

    async def test_reads_stdin(self, capsys: pytest.CaptureFixture[str]) -> None:
        """'-' reads the text from stdin."""
        args = parse_args(["-", "-l", "ja", "-b", "demo"])

        with (
            patch.object(sys, "stdin", io.StringIO("Good morning\n")),
            patch("pollyglot.cli.create_backend", return_value=DemoTranslator(delay=0)),
        ):
            code = await run(args)

        assert code == EXIT_SUCCESS
        assert "Original text:\nGood morning" in capsys.readouterr().out

    async def test_stdin_trailing_newline_not_counted(self) -> None:
        """Text at the limit piped with a newline is still accepted."""
        args = parse_args(["-", "-l", "fr", "-b", "demo"])

        with (
            patch.object(sys, "stdin", io.StringIO("a" * 500 + "\n")),
            patch("pollyglot.cli.create_backend", return_value=DemoTranslator(delay=0)),
        ):
            code = await run(args)

        assert code == EXIT_SUCCESS

    async def test_missing_language(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Missing language exits with the validation code."""
        code = await run(parse_args(["Hello", "-b", "demo"]))

        assert code == EXIT_INVALID
        assert "Please select a language." in capsys.readouterr().err

    async def test_missing_credentials_closes_backend(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A configuration failure is reported and the backend is closed."""
        translator = MagicMock()
        translator.name = "openai"
        translator.translate = AsyncMock(side_effect=MissingCredentialsError("no key"))
        translator.close = AsyncMock()

        with patch("pollyglot.cli.create_backend", return_value=translator):
            code = await run(parse_args(["Hello", "-l", "fr"]))

        assert code == EXIT_FAILED
        assert "not configured" in capsys.readouterr().err
        translator.close.assert_awaited_once()

    async def test_missing_optional_dependency(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A missing extra is reported instead of crashing."""
        with patch(
            "pollyglot.cli.create_backend",
            side_effect=ImportError("openai is required for OpenAI backend."),
        ):
            code = await run(parse_args(["Hello", "-l", "fr"]))

        assert code == EXIT_FAILED
        assert "openai is required" in capsys.readouterr().err
