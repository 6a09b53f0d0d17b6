# SPDX-License-Identifier: Apache-2.0
"""Classification of translation failures into user-facing messages."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from pollyglot.core.models import ErrorKind
from pollyglot.translators.base import MissingCredentialsError, TransportError

CONFIGURATION_ERROR_MESSAGE = (
    "Translation service is not configured. Check the API key and try again."
)
GENERIC_ERROR_MESSAGE = "Translation failed. Please try again later."


@dataclass(frozen=True)
class ClassifiedFailure:
    """A failure kind paired with the message shown to the user."""

    kind: ErrorKind
    message: str


def classify_failure(error: BaseException) -> ClassifiedFailure:
    """Map a raised failure to its kind and user-facing message.

    The raw error text is never part of the message.
    """
    if isinstance(error, MissingCredentialsError):
        return ClassifiedFailure(ErrorKind.MISSING_CREDENTIALS, CONFIGURATION_ERROR_MESSAGE)
    if isinstance(error, (TransportError, asyncio.TimeoutError)):
        return ClassifiedFailure(ErrorKind.TRANSPORT_FAILURE, GENERIC_ERROR_MESSAGE)
    return ClassifiedFailure(ErrorKind.TRANSLATION_FAILED, GENERIC_ERROR_MESSAGE)
