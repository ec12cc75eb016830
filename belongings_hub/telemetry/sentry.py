"""Sentry error tracking with per-class rate-limiting."""

from __future__ import annotations

import time
import logging
from typing import Any

import sentry_sdk

from ..logging import _CONNECTION_ID, _USER_ID
from ..config.telemetry import (
    SENTRY_DSN,
    SENTRY_RELEASE,
    SENTRY_ENVIRONMENT,
    SENTRY_SAMPLE_RATE,
    SENTRY_RATE_LIMIT_S,
    SENTRY_TAG_USER_ID,
    SENTRY_TAG_CONNECTION_ID,
)

logger = logging.getLogger(__name__)

_error_timestamps: dict[str, float] = {}
_initialized: bool = False


def init_sentry() -> None:
    """Initialize Sentry SDK. Idempotent."""
    global _initialized  # noqa: PLW0603
    if _initialized:
        return

    kwargs: dict[str, Any] = {
        "dsn": SENTRY_DSN,
        "environment": SENTRY_ENVIRONMENT,
        "traces_sample_rate": 0.0,
        "sample_rate": SENTRY_SAMPLE_RATE,
        "attach_stacktrace": True,
    }
    if SENTRY_RELEASE:
        kwargs["release"] = SENTRY_RELEASE

    sentry_sdk.init(**kwargs)
    _initialized = True
    logger.info("Sentry initialized: environment=%s", SENTRY_ENVIRONMENT)


def shutdown_sentry() -> None:
    """Flush Sentry events. Idempotent."""
    global _initialized  # noqa: PLW0603
    if not _initialized:
        return
    try:
        sentry_sdk.flush(timeout=2.0)
    except Exception:  # noqa: BLE001
        logger.debug("Sentry flush failed", exc_info=True)
    _initialized = False


def capture_error(
    error: BaseException,
    *,
    user_id: str | None = None,
    connection_id: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Report an error to Sentry with rate-limiting per error class."""
    if not _initialized:
        return

    key = type(error).__qualname__
    now = time.monotonic()
    last = _error_timestamps.get(key, 0.0)
    if (now - last) < SENTRY_RATE_LIMIT_S:
        return
    _error_timestamps[key] = now

    uid = user_id or _USER_ID.get()
    cid = connection_id or _CONNECTION_ID.get()

    with sentry_sdk.new_scope() as scope:
        scope.set_tag(SENTRY_TAG_USER_ID, uid)
        scope.set_tag(SENTRY_TAG_CONNECTION_ID, cid)
        if extra:
            for k, v in extra.items():
                scope.set_extra(k, v)
        sentry_sdk.capture_exception(error)


def add_breadcrumb(
    message: str,
    *,
    category: str,
    level: str = "info",
    data: dict[str, Any] | None = None,
) -> None:
    """Add a Sentry breadcrumb. No-op when Sentry is disabled."""
    if not _initialized:
        return
    sentry_sdk.add_breadcrumb(message=message, category=category, level=level, data=data or {})


__all__ = ["init_sentry", "shutdown_sentry", "capture_error", "add_breadcrumb"]
