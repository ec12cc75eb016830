"""Centralized exception classes for the relay service.

Organization:
    - auth.py: Token failures (missing, invalid, expired)
    - validation.py: Input validation errors with error codes
    - persistence.py: Store write failures
    - classify.py: Exception-to-telemetry label mapping
"""

from .auth import AuthError, MissingTokenError, InvalidTokenError, ExpiredTokenError
from .validation import ValidationError
from .persistence import PersistenceError
from .classify import classify_error

__all__ = [
    "AuthError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "ValidationError",
    "PersistenceError",
    "classify_error",
]
