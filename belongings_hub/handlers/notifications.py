"""Server-initiated pushes over the relay's registered sockets."""

from __future__ import annotations

import logging

from ..errors import classify_error
from ..config.websocket import WS_MSG_BADGE_EARNED
from ..telemetry.sentry import capture_error
from ..telemetry.instruments import get_metrics
from .connections import ConnectionRegistry
from .websocket.helpers import build_event, safe_send_json

logger = logging.getLogger(__name__)


class BadgePushAdapter:
    """Sends ``badge_earned`` events to users connected to this process.

    Fire-and-forget: one send attempt, no retry, no acknowledgement. A user
    without a registered socket, or whose socket fails mid-send, simply gets
    nothing and no error is raised; the badge itself is already stored.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry

    async def push_badge_earned(self, user_id: str, badge_name: str) -> bool:
        """Return True if a frame was written to the user's socket."""
        client = self._registry.get_client(user_id)
        if client is None:
            logger.debug("badge push skipped: user_id=%s not connected", user_id)
            return False
        try:
            sent = await safe_send_json(client, build_event(WS_MSG_BADGE_EARNED, {"badgeName": badge_name}))
        except Exception as exc:  # noqa: BLE001
            logger.warning("badge push failed: user_id=%s badge=%r", user_id, badge_name, exc_info=True)
            get_metrics().errors_total.add(1, {"category": classify_error(exc)})
            capture_error(exc, user_id=user_id, extra={"badge": badge_name})
            return False
        if sent:
            get_metrics().badge_pushes_total.add(1)
            logger.info("badge push sent: user_id=%s badge=%r", user_id, badge_name)
        return sent


__all__ = ["BadgePushAdapter"]
