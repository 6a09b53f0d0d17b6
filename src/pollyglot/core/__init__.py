# SPDX-License-Identifier: Apache-2.0
"""Core models and validation."""

from .models import (
    LANGUAGE_FIELD,
    MAX_TEXT_LENGTH,
    TEXT_FIELD,
    ErrorKind,
    Failed,
    FieldError,
    FieldErrorCode,
    FormInput,
    Idle,
    Language,
    Loading,
    RequestState,
    StateTag,
    Success,
    TranslationRequest,
    Validating,
    ValidationResult,
)
from .validator import ValidatorConfig, validate

__all__ = [
    "ErrorKind",
    "Failed",
    "FieldError",
    "FieldErrorCode",
    "FormInput",
    "Idle",
    "LANGUAGE_FIELD",
    "Language",
    "Loading",
    "MAX_TEXT_LENGTH",
    "RequestState",
    "StateTag",
    "Success",
    "TEXT_FIELD",
    "TranslationRequest",
    "Validating",
    "ValidationResult",
    "ValidatorConfig",
    "validate",
]
