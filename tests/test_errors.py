# SPDX-License-Identifier: Apache-2.0
"""Tests for failure classification."""

from __future__ import annotations

import asyncio

import pytest

from pollyglot.controller import (
    CONFIGURATION_ERROR_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    ErrorKind,
    classify_failure,
)
from pollyglot.core.models import Failed
from pollyglot.translators import MissingCredentialsError, TransportError, TranslatorError


class TestClassifyFailure:
    """Tests for classify_failure."""

    def test_missing_credentials(self) -> None:
        """Missing credentials get the configuration message."""
        failure = classify_failure(MissingCredentialsError("OPENAI_API_KEY not set"))

        assert failure.kind is ErrorKind.MISSING_CREDENTIALS
        assert failure.message == CONFIGURATION_ERROR_MESSAGE

    @pytest.mark.parametrize(
        "error",
        [TransportError("429 Too Many Requests"), asyncio.TimeoutError()],
    )
    def test_transport_failure(self, error: Exception) -> None:
        """Transport errors and timeouts get the generic message."""
        failure = classify_failure(error)

        assert failure.kind is ErrorKind.TRANSPORT_FAILURE
        assert failure.message == GENERIC_ERROR_MESSAGE

    @pytest.mark.parametrize(
        "error",
        [RuntimeError("boom"), TranslatorError("base"), ValueError("bad json")],
    )
    def test_anything_else(self, error: Exception) -> None:
        """Other errors fall into the catch-all kind."""
        failure = classify_failure(error)

        assert failure.kind is ErrorKind.TRANSLATION_FAILED
        assert failure.message == GENERIC_ERROR_MESSAGE

    def test_raw_error_not_in_message(self) -> None:
        """The raw error text never reaches the user message."""
        failure = classify_failure(TransportError("upstream said: sk-secret"))

        assert "sk-secret" not in failure.message

    def test_messages_distinguish_setup_from_transient(self) -> None:
        """Configuration and transient messages differ."""
        assert CONFIGURATION_ERROR_MESSAGE != GENERIC_ERROR_MESSAGE


class TestFailedState:
    """Tests for the Failed state payload."""

    def test_requires_form_input(self) -> None:
        """A Failed state always carries the input to retry."""
        with pytest.raises(TypeError):
            Failed("Hello", GENERIC_ERROR_MESSAGE, ErrorKind.TRANSPORT_FAILURE)  # type: ignore[call-arg]

    def test_error_kind_is_enum(self) -> None:
        """ErrorKind is shared between the controller and the state models."""
        from pollyglot.core.models import ErrorKind as ModelErrorKind

        assert ModelErrorKind is ErrorKind
