"""Handshake authentication for WebSocket connections.

The bearer token is read from the ``token`` query parameter of the upgrade
request; browser-like clients cannot attach an Authorization header to it.
"""

from __future__ import annotations

import logging

from fastapi import WebSocket

from ...config.websocket import WS_TOKEN_QUERY_PARAM
from ...errors import MissingTokenError
from ...security.tokens import TokenPayload, verify_token

logger = logging.getLogger(__name__)


def extract_token(websocket: WebSocket) -> str:
    """Return the handshake token or raise MissingTokenError."""
    token = websocket.query_params.get(WS_TOKEN_QUERY_PARAM)
    if not token or not token.strip():
        raise MissingTokenError("Token required")
    return token.strip()


def authenticate_websocket(websocket: WebSocket) -> TokenPayload:
    """Verify the handshake token and return the caller's identity.

    Raises:
        MissingTokenError: No token in the query string.
        InvalidTokenError: Verification failed (includes ExpiredTokenError).
    """
    token = extract_token(websocket)
    payload = verify_token(token)
    logger.info("WebSocket connection authenticated user_id=%s", payload.user_id)
    return payload


__all__ = ["extract_token", "authenticate_websocket"]
