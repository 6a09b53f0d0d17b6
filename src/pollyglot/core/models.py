# SPDX-License-Identifier: Apache-2.0
"""Data models for the translation request lifecycle.

This module defines the form input, validation result, translation request
and the tagged request-state variants exposed to the presentation layer.
All models are immutable; a state change always produces a new object.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Optional, Union

TEXT_FIELD = "text"
LANGUAGE_FIELD = "language"

MAX_TEXT_LENGTH = 500


class Language(str, Enum):
    """Supported target languages (display names as values)."""

    FRENCH = "French"
    SPANISH = "Spanish"
    JAPANESE = "Japanese"

    @property
    def id(self) -> str:
        """Lowercase identifier ("french", "spanish", "japanese")."""
        return self.value.lower()

    @property
    def code(self) -> str:
        """ISO 639-1 language code."""
        return LANGUAGE_CODES[self]

    @classmethod
    def parse(cls, value: object) -> Optional[Language]:
        """Resolve a member from a member, display name, id or code.

        Args:
            value: Raw language selection from the form.

        Returns:
            Matching Language, or None when the value is not supported.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        key = value.strip().lower()
        if not key:
            return None
        for member in cls:
            if key in (member.id, member.code):
                return member
        return None


LANGUAGE_CODES: dict[Language, str] = {
    Language.FRENCH: "fr",
    Language.SPANISH: "es",
    Language.JAPANESE: "ja",
}


class FieldErrorCode(str, Enum):
    """Validation failure kinds."""

    EMPTY_TEXT = "empty_text"
    TEXT_TOO_LONG = "text_too_long"
    NO_LANGUAGE_SELECTED = "no_language_selected"


@dataclass(frozen=True)
class FieldError:
    """A validation failure attached to one form field."""

    code: FieldErrorCode
    message: str


def _freeze(errors: Mapping[str, FieldError]) -> Mapping[str, FieldError]:
    return MappingProxyType(dict(errors))


NO_FIELD_ERRORS: Mapping[str, FieldError] = _freeze({})


@dataclass(frozen=True)
class FormInput:
    """Raw values of the translation form.

    Attributes:
        text: Text to translate, exactly as typed.
        target_language: Selected language, or None when nothing is selected.
    """

    text: str
    target_language: Union[Language, str, None] = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a FormInput.

    Attributes:
        field_errors: Read-only mapping of field name ("text" | "language")
            to the error found for that field.
        language: Resolved target language when the selection is supported.
    """

    field_errors: Mapping[str, FieldError] = field(default_factory=lambda: NO_FIELD_ERRORS)
    language: Optional[Language] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_errors", _freeze(self.field_errors))

    @property
    def valid(self) -> bool:
        """True when no field failed validation."""
        return not self.field_errors

    def has_error(self, code: FieldErrorCode) -> bool:
        """Check whether any field failed with the given code."""
        return any(error.code is code for error in self.field_errors.values())


@dataclass(frozen=True)
class TranslationRequest:
    """A validated request handed to the translator backend."""

    source_text: str
    target_language: Language

    @classmethod
    def from_validated(
        cls, form_input: FormInput, result: ValidationResult
    ) -> TranslationRequest:
        """Build a request from a passing validation result.

        Raises:
            ValueError: If the validation result is not valid.
        """
        if not result.valid or result.language is None:
            raise ValueError("TranslationRequest requires a passing ValidationResult")
        return cls(source_text=form_input.text, target_language=result.language)


class ErrorKind(str, Enum):
    """Failure kinds surfaced on the Failed state."""

    MISSING_CREDENTIALS = "missing_credentials"
    TRANSPORT_FAILURE = "transport_failure"
    TRANSLATION_FAILED = "translation_failed"


class StateTag(str, Enum):
    """Discriminator for RequestState variants."""

    IDLE = "idle"
    VALIDATING = "validating"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Idle:
    """No request outstanding; the input form is shown.

    Attributes:
        field_errors: Validation errors from the last submission attempt.
        draft: Input retained for the form (last submitted or reset input).
    """

    tag: ClassVar[StateTag] = StateTag.IDLE

    field_errors: Mapping[str, FieldError] = field(default_factory=lambda: NO_FIELD_ERRORS)
    draft: Optional[FormInput] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_errors", _freeze(self.field_errors))


@dataclass(frozen=True)
class Validating:
    """Transient state while a submission is checked."""

    tag: ClassVar[StateTag] = StateTag.VALIDATING

    form_input: FormInput


@dataclass(frozen=True)
class Loading:
    """A translation request is outstanding."""

    tag: ClassVar[StateTag] = StateTag.LOADING

    form_input: FormInput


@dataclass(frozen=True)
class Success:
    """Translation finished successfully."""

    tag: ClassVar[StateTag] = StateTag.SUCCESS

    original_text: str
    translated_text: str
    target_language: Optional[Language] = None


@dataclass(frozen=True)
class Failed:
    """Translation failed; the user may re-submit.

    Attributes:
        original_text: Text that was submitted.
        error_message: User-facing message (never the raw error).
        error_kind: Classified failure kind.
        form_input: Last submitted input, kept so it can be retried.
    """

    tag: ClassVar[StateTag] = StateTag.FAILED

    original_text: str
    error_message: str
    error_kind: ErrorKind
    form_input: FormInput


RequestState = Union[Idle, Validating, Loading, Success, Failed]
