# SPDX-License-Identifier: Apache-2.0
"""State listener protocol for the request controller."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pollyglot.core.models import RequestState


@runtime_checkable
class StateListener(Protocol):
    """Called with the new state after every transition."""

    def __call__(self, state: RequestState) -> None: ...
