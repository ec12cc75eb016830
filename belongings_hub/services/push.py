"""Mobile push notification hook.

Delivery through Expo lives outside this service; the default notifier only
records what would have been sent.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class PushNotifier(Protocol):
    async def send(self, user_id: str, title: str, body: str) -> None: ...


class LoggingPushNotifier:
    """Notifier that logs instead of delivering."""

    async def send(self, user_id: str, title: str, body: str) -> None:
        logger.info("push: user_id=%s title=%r len(body)=%s", user_id, title, len(body))


__all__ = ["PushNotifier", "LoggingPushNotifier"]
