"""Primary WebSocket connection handler orchestration.

Lifecycle of one connection:

1. Handshake:
   - Read the ``token`` query parameter and verify it
   - Missing or invalid token: accept, send an error frame, close 1008
2. Admission:
   - Register the socket under the token's user id (last writer wins)
3. Message loop:
   - chat_message frames are persisted and relayed (see message_loop)
4. Cleanup:
   - Unregister, but only if the registry still points at this socket
"""

from __future__ import annotations

import uuid
import logging

from fastapi import WebSocket

from .auth import authenticate_websocket
from .errors import reject_connection
from .disconnects import is_expected_disconnect
from .message_loop import run_message_loop
from ...errors import InvalidTokenError, MissingTokenError, classify_error
from ...config.websocket import (
    WS_ERROR_INVALID_TOKEN,
    WS_ERROR_TOKEN_REQUIRED,
    WS_CLOSE_INVALID_TOKEN_REASON,
    WS_CLOSE_POLICY_VIOLATION_CODE,
    WS_CLOSE_TOKEN_REQUIRED_REASON,
)
from ...logging import log_context
from ...runtime.dependencies import RuntimeDeps
from ...telemetry.sentry import add_breadcrumb, capture_error
from ...telemetry.instruments import get_metrics

logger = logging.getLogger(__name__)


async def _prepare_connection(ws: WebSocket) -> str | None:
    """Authenticate the handshake; return the user id or None if rejected."""
    try:
        payload = authenticate_websocket(ws)
    except MissingTokenError as exc:
        logger.info("WebSocket rejected: %s", exc.message)
        get_metrics().connections_rejected_total.add(1, {"reason": WS_ERROR_TOKEN_REQUIRED})
        await reject_connection(
            ws,
            error_code=WS_ERROR_TOKEN_REQUIRED,
            message=exc.message,
            close_code=WS_CLOSE_POLICY_VIOLATION_CODE,
            reason=WS_CLOSE_TOKEN_REQUIRED_REASON,
        )
        return None
    except InvalidTokenError as exc:
        logger.info("WebSocket rejected: %s (%s)", exc.message, exc.error_code)
        get_metrics().connections_rejected_total.add(1, {"reason": WS_ERROR_INVALID_TOKEN})
        await reject_connection(
            ws,
            error_code=WS_ERROR_INVALID_TOKEN,
            message=exc.message,
            close_code=WS_CLOSE_POLICY_VIOLATION_CODE,
            reason=WS_CLOSE_INVALID_TOKEN_REASON,
        )
        return None

    await ws.accept()
    return payload.user_id


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    """Handle one WebSocket connection from handshake to cleanup.

    Args:
        ws: The incoming WebSocket connection from FastAPI.
        runtime_deps: Registry and services shared by the process.
    """
    user_id = await _prepare_connection(ws)
    if user_id is None:
        return

    registry = runtime_deps.registry
    connection_id = uuid.uuid4().hex[:8]

    with log_context(user_id=user_id, connection_id=connection_id):
        registry.register(user_id, ws)
        metrics = get_metrics()
        metrics.connections_accepted_total.add(1)
        metrics.active_connections.add(1)
        add_breadcrumb("websocket connected", category="websocket", data={"user_id": user_id})
        logger.info(
            "WebSocket connection accepted. Active: %s",
            registry.connection_count(),
        )

        try:
            await run_message_loop(ws, user_id, runtime_deps)
        except Exception as exc:  # noqa: BLE001
            if not is_expected_disconnect(exc):
                logger.exception("WebSocket error")
                metrics.errors_total.add(1, {"category": classify_error(exc)})
                capture_error(exc)
        finally:
            registry.unregister(user_id, ws)
            metrics.active_connections.add(-1)
            logger.info(
                "WebSocket connection closed. Active: %s",
                registry.connection_count(),
            )


__all__ = ["handle_websocket_connection"]
