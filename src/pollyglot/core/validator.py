# SPDX-License-Identifier: Apache-2.0
"""Form validation for translation submissions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import (
    LANGUAGE_FIELD,
    MAX_TEXT_LENGTH,
    TEXT_FIELD,
    FieldError,
    FieldErrorCode,
    FormInput,
    Language,
    ValidationResult,
)

EMPTY_TEXT_MESSAGE = "Please enter some text to translate."
TEXT_TOO_LONG_MESSAGE = "Text must be {limit} characters or fewer."
NO_LANGUAGE_MESSAGE = "Please select a language."


@dataclass(frozen=True)
class ValidatorConfig:
    """Validation rules.

    Attributes:
        max_text_length: Maximum untrimmed text length.
        default_language: Legacy behavior: language used when none is
            selected. None requires an explicit selection.
    """

    max_text_length: int = MAX_TEXT_LENGTH
    default_language: Optional[Language] = None


DEFAULT_VALIDATOR_CONFIG = ValidatorConfig()


def validate(
    form_input: FormInput,
    config: Optional[ValidatorConfig] = None,
) -> ValidationResult:
    """Check form fields against the acceptance rules.

    Text and language rules are evaluated independently, so both fields
    can fail at once. Text that trims to empty reports EMPTY_TEXT even
    when its untrimmed length is over the limit.

    Args:
        form_input: Raw form values.
        config: Validation rules (default: 500 characters, explicit language).

    Returns:
        A new ValidationResult.
    """
    config = config or DEFAULT_VALIDATOR_CONFIG
    errors: dict[str, FieldError] = {}

    text = form_input.text or ""
    if len(text.strip()) == 0:
        errors[TEXT_FIELD] = FieldError(FieldErrorCode.EMPTY_TEXT, EMPTY_TEXT_MESSAGE)
    elif len(text) > config.max_text_length:
        errors[TEXT_FIELD] = FieldError(
            FieldErrorCode.TEXT_TOO_LONG,
            TEXT_TOO_LONG_MESSAGE.format(limit=config.max_text_length),
        )

    language = Language.parse(form_input.target_language)
    if language is None:
        language = config.default_language
    if language is None:
        errors[LANGUAGE_FIELD] = FieldError(
            FieldErrorCode.NO_LANGUAGE_SELECTED, NO_LANGUAGE_MESSAGE
        )

    return ValidationResult(field_errors=errors, language=language)
