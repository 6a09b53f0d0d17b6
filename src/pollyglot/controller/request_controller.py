# SPDX-License-Identifier: Apache-2.0
"""Request controller: the state machine behind the translation form."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping

from pollyglot.controller.errors import (
    GENERIC_ERROR_MESSAGE,
    ClassifiedFailure,
    ErrorKind,
    classify_failure,
)
from pollyglot.controller.listeners import StateListener
from pollyglot.core.models import (
    NO_FIELD_ERRORS,
    Failed,
    FieldError,
    FormInput,
    Idle,
    Loading,
    RequestState,
    Success,
    TranslationRequest,
    Validating,
)
from pollyglot.core.validator import ValidatorConfig, validate
from pollyglot.translators.base import TransportError, TranslatorBackend

logger = logging.getLogger(__name__)


@dataclass
class ControllerConfig:
    """Request controller configuration."""

    validator: ValidatorConfig = field(default_factory=ValidatorConfig)

    # Seconds to wait for the backend; None waits indefinitely
    request_timeout: float | None = None

    # Keep the submitted text and language in the form after reset
    preserve_input_on_reset: bool = True


class RequestController:
    """Single owner of the translation request state.

    Accepts form submissions, validates them, dispatches at most one
    translation at a time and classifies the outcome. The presentation
    layer reads ``state`` or subscribes to transitions; it may only call
    ``submit`` and ``reset``.
    """

    def __init__(
        self,
        translator: TranslatorBackend,
        config: ControllerConfig | None = None,
    ) -> None:
        """Initialize RequestController."""
        self._translator = translator
        self._config = config or ControllerConfig()
        self._state: RequestState = Idle()
        self._listeners: list[StateListener] = []
        self._generation = 0

    @property
    def state(self) -> RequestState:
        """Current state snapshot."""
        return self._state

    @property
    def field_errors(self) -> Mapping[str, FieldError]:
        """Validation errors shown on the input form."""
        if isinstance(self._state, Idle):
            return self._state.field_errors
        return NO_FIELD_ERRORS

    @property
    def is_busy(self) -> bool:
        """True while a translation request is outstanding."""
        return isinstance(self._state, Loading)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for state transitions.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def submit(self, form_input: FormInput) -> RequestState:
        """Validate the form and, if it passes, translate it.

        Ignored while a translation is in flight.

        Args:
            form_input: Raw form values.

        Returns:
            The state after the submission resolved.
        """
        if isinstance(self._state, Loading):
            logger.warning("Submission ignored: a translation is already in progress")
            return self._state

        result = validate(form_input, self._config.validator)
        self._transition(Validating(form_input))
        if not result.valid:
            logger.debug("Validation failed: %s", sorted(result.field_errors))
            return self._transition(
                Idle(field_errors=result.field_errors, draft=form_input)
            )

        request = TranslationRequest.from_validated(form_input, result)
        self._generation += 1
        generation = self._generation
        self._transition(Loading(form_input))

        try:
            translated = await self._dispatch(request)
        except asyncio.CancelledError:
            if not self._is_stale(generation):
                self._fail(
                    form_input,
                    ClassifiedFailure(ErrorKind.TRANSLATION_FAILED, GENERIC_ERROR_MESSAGE),
                )
            raise
        except Exception as exc:
            if self._is_stale(generation):
                logger.warning("Discarding failure of superseded request: %s", exc)
                return self._state
            return self._fail(form_input, self._classify(exc))

        if self._is_stale(generation):
            logger.warning("Discarding result of superseded request")
            return self._state

        if not isinstance(translated, str) or not translated.strip():
            return self._fail(
                form_input, self._classify(TransportError("Backend returned empty translation"))
            )

        return self._transition(
            Success(
                original_text=form_input.text,
                translated_text=translated.strip(),
                target_language=request.target_language,
            )
        )

    def reset(self) -> RequestState:
        """Return from Success or Failed to the input form.

        A no-op on Idle; ignored while a request is in flight.

        Returns:
            The state after the reset.
        """
        state = self._state
        if isinstance(state, Idle):
            return state
        if not isinstance(state, (Success, Failed)):
            logger.warning("Reset ignored while in %s state", state.tag.value)
            return state

        draft: FormInput | None = None
        if self._config.preserve_input_on_reset:
            if isinstance(state, Failed):
                draft = state.form_input
            else:
                draft = FormInput(text=state.original_text, target_language=state.target_language)
        return self._transition(Idle(draft=draft))

    async def _dispatch(self, request: TranslationRequest) -> str:
        logger.debug(
            "Dispatching translation to %s: %d chars -> %s",
            self._translator.name,
            len(request.source_text),
            request.target_language.value,
        )
        call = self._translator.translate(request.source_text, request.target_language)
        if self._config.request_timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self._config.request_timeout)

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation or not isinstance(self._state, Loading)

    def _classify(self, error: Exception) -> ClassifiedFailure:
        failure = classify_failure(error)
        if failure.kind is ErrorKind.TRANSLATION_FAILED:
            logger.error("Unexpected translation error", exc_info=error)
        else:
            logger.warning("Translation failed (%s): %s", failure.kind.value, error)
        return failure

    def _fail(self, form_input: FormInput, failure: ClassifiedFailure) -> RequestState:
        return self._transition(
            Failed(
                original_text=form_input.text,
                error_message=failure.message,
                error_kind=failure.kind,
                form_input=form_input,
            )
        )

    def _transition(self, state: RequestState) -> RequestState:
        logger.debug("State: %s -> %s", self._state.tag.value, state.tag.value)
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")
        return state
