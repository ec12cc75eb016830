"""Exception classification helpers for metrics and telemetry labels."""

from __future__ import annotations

from .auth import AuthError
from .validation import ValidationError
from .persistence import PersistenceError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (AuthError, "auth"),
    (ValidationError, "validation"),
    (PersistenceError, "persistence"),
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a metric-friendly category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
