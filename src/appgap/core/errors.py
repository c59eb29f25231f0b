"""Error taxonomy for the analysis pipeline.

Every failure that leaves the pipeline is an :class:`AnalysisError` tagged
with an :class:`ErrorKind`. The kind decides the HTTP status and how much
of the message the caller gets to see; :func:`to_error_response` is the one
place that decision is made.
"""

import logging
from enum import Enum
from typing import Any, Dict, Tuple

from .constants import ErrorConstants

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Error categories and their HTTP status hints."""
    VALIDATION = 400
    UPSTREAM_UNAVAILABLE = 503
    UNCLASSIFIED = 500


class AnalysisError(Exception):
    """A pipeline failure with a kind, a message and a status hint."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_hint(self) -> int:
        return self.kind.value

    @classmethod
    def validation(cls, message: str) -> "AnalysisError":
        """Caller-fixable problem: bad input, missing key, unparsable model output."""
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def upstream_unavailable(cls, message: str) -> "AnalysisError":
        """The completion service could not be reached or rejected the call."""
        return cls(ErrorKind.UPSTREAM_UNAVAILABLE, message)

    @classmethod
    def unclassified(cls, message: str) -> "AnalysisError":
        return cls(ErrorKind.UNCLASSIFIED, message)

    def __repr__(self) -> str:
        return f"AnalysisError(kind={self.kind.name}, message={self.message!r})"


def _public_message(exc: BaseException) -> Tuple[str, int]:
    if isinstance(exc, AnalysisError):
        if exc.kind is ErrorKind.VALIDATION:
            return exc.message, exc.status_hint
        if exc.kind is ErrorKind.UPSTREAM_UNAVAILABLE:
            return ErrorConstants.SERVICE_UNAVAILABLE, exc.status_hint
    return ErrorConstants.UNCLASSIFIED, ErrorKind.UNCLASSIFIED.value


def to_error_response(exc: BaseException) -> Tuple[Dict[str, Any], int]:
    """Translate any exception into an error body and HTTP status.

    The body always carries empty result arrays so clients can render it
    the same way as a successful response.
    """
    message, status = _public_message(exc)
    if status >= 500:
        logger.error(f"Request failed ({status}): {exc!r}")
    else:
        logger.warning(f"Request rejected ({status}): {exc}")
    body = {
        "error": message,
        "themes": [],
        "prioritizedThemes": [],
    }
    return body, status
