"""Safe sending helpers for WebSocket frames.

Sends to a peer that is going away must never take down the caller: the
relay writes to the *recipient's* socket from inside the *sender's* message
loop, so a teardown error on one would otherwise close the other.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import WebSocket

from .disconnects import is_expected_disconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    """Send text to the client, returning False if the socket is gone.

    Args:
        ws: The WebSocket connection.
        text: Raw text to send.

    Returns:
        True if sent successfully, False if the client disconnected.
    """
    try:
        await ws.send_text(text)
    except Exception as exc:
        if not is_expected_disconnect(exc):
            raise
        logger.info("WebSocket disconnected while sending %s bytes", len(text))
        return False
    return True


async def safe_send_json(ws: WebSocket, payload: dict[str, Any]) -> bool:
    """Send a JSON payload, swallowing client disconnects."""
    return await safe_send_text(ws, json.dumps(payload))


def build_event(msg_type: str, data: dict[str, Any]) -> dict[str, Any]:
    """Outbound frame envelope: ``{"type": ..., "data": ...}``."""
    return {"type": msg_type, "data": data}


__all__ = ["safe_send_text", "safe_send_json", "build_event"]
