"""Environment validation helpers."""

from __future__ import annotations

import logging

from belongings_hub.config.deploy import APP_ENV
from belongings_hub.config.secrets import (
    JWT_SECRET,
    JWT_ALGORITHM,
    JWT_DEV_SECRET,
    JWT_EXPIRES_IN,
    SUPPORTED_JWT_ALGORITHMS,
)
from .durations import parse_duration

logger = logging.getLogger(__name__)


def validate_env() -> None:
    """Validate required configuration once during startup."""
    errors: list[str] = []

    if JWT_ALGORITHM not in SUPPORTED_JWT_ALGORITHMS:
        errors.append(f"JWT_ALGORITHM must be one of {SUPPORTED_JWT_ALGORITHMS}, got: {JWT_ALGORITHM}")

    try:
        parse_duration(JWT_EXPIRES_IN)
    except ValueError as exc:
        errors.append(f"JWT_EXPIRES_IN is invalid: {exc}")

    if errors:
        raise ValueError("; ".join(errors))

    if APP_ENV == "production" and JWT_SECRET == JWT_DEV_SECRET:
        logger.warning(
            "JWT_SECRET is using the default insecure value in a production-like environment. "
            "Please set a strong, unique JWT_SECRET environment variable."
        )


__all__ = ["validate_env"]
