# SPDX-License-Identifier: Apache-2.0
"""Translation request lifecycle package."""

from .errors import (
    CONFIGURATION_ERROR_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    ClassifiedFailure,
    ErrorKind,
    classify_failure,
)
from .listeners import StateListener
from .request_controller import ControllerConfig, RequestController

__all__ = [
    "CONFIGURATION_ERROR_MESSAGE",
    "ClassifiedFailure",
    "ControllerConfig",
    "ErrorKind",
    "GENERIC_ERROR_MESSAGE",
    "RequestController",
    "StateListener",
    "classify_failure",
]
