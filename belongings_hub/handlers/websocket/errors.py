"""Shared response helpers for WebSocket error handling.

Error frames follow one JSON structure:

    {
        "type": "error",
        "error_code": "invalid_token",  # Machine-readable code
        "message": "Human-readable description"
    }

They are only sent during the handshake. Once a connection is admitted the
relay never answers a frame with an error; dropped frames are logged
server-side only.
"""

from __future__ import annotations

import json
import contextlib
from typing import Any

from fastapi import WebSocket

from ...config.websocket import WS_MSG_ERROR


async def send_error(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    extra: dict[str, Any] | None = None,
) -> None:
    """Send a structured error message to the client."""
    payload: dict[str, Any] = {
        "type": WS_MSG_ERROR,
        "error_code": error_code,
        "message": message,
    }
    if extra:
        payload.update(extra)
    await ws.send_text(json.dumps(payload))


async def reject_connection(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    close_code: int,
    reason: str,
) -> None:
    """Accept connection briefly to send an error, then close immediately.

    Closing before accept would surface as an HTTP 403 on the upgrade; the
    client needs the real close code (1008) to tell an auth failure apart
    from a network problem.

    Args:
        ws: The WebSocket connection to reject.
        error_code: Machine-readable error identifier.
        message: Human-readable rejection detail.
        close_code: WebSocket close code.
        reason: Close frame reason text.
    """
    await ws.accept()
    with contextlib.suppress(Exception):
        await send_error(ws, error_code=error_code, message=message)
    await ws.close(code=close_code, reason=reason)


__all__ = ["send_error", "reject_connection"]
