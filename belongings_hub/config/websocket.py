"""WebSocket-specific runtime configuration values.

Close Codes (RFC 6455):
    1000: Normal closure
    1008: Policy violation (missing or invalid token)

The handshake token travels as a query parameter because browser-like
WebSocket clients cannot set custom headers on the upgrade request.
"""

from __future__ import annotations

import os

# ============================================================================
# Handshake
# ============================================================================

WS_PATH = os.getenv("WS_PATH", "/ws")
WS_TOKEN_QUERY_PARAM = os.getenv("WS_TOKEN_QUERY_PARAM", "token")

# ============================================================================
# WebSocket Close Codes
# ============================================================================

WS_CLOSE_POLICY_VIOLATION_CODE = int(os.getenv("WS_CLOSE_POLICY_VIOLATION_CODE", "1008"))
WS_CLOSE_NORMAL_CODE = int(os.getenv("WS_CLOSE_NORMAL_CODE", "1000"))
WS_CLOSE_TOKEN_REQUIRED_REASON = "Token required"
WS_CLOSE_INVALID_TOKEN_REASON = "Invalid token"

# ============================================================================
# Frame types
# ============================================================================

WS_MSG_CHAT = "chat_message"
WS_MSG_BADGE_EARNED = "badge_earned"
WS_MSG_ERROR = "error"

WS_ERROR_TOKEN_REQUIRED = "token_required"
WS_ERROR_INVALID_TOKEN = "invalid_token"

__all__ = [
    "WS_PATH",
    "WS_TOKEN_QUERY_PARAM",
    "WS_CLOSE_POLICY_VIOLATION_CODE",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_TOKEN_REQUIRED_REASON",
    "WS_CLOSE_INVALID_TOKEN_REASON",
    "WS_MSG_CHAT",
    "WS_MSG_BADGE_EARNED",
    "WS_MSG_ERROR",
    "WS_ERROR_TOKEN_REQUIRED",
    "WS_ERROR_INVALID_TOKEN",
]
