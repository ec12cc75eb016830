"""Configuration for test clients."""

from .env import DEFAULT_SERVER_WS_URL, DEFAULT_TOKEN_ENV, DEFAULT_RECV_TIMEOUT_SEC
from .defaults import DEFAULT_WS_PATH, DEFAULT_WS_PING_INTERVAL, DEFAULT_WS_PING_TIMEOUT

__all__ = [
    "DEFAULT_SERVER_WS_URL",
    "DEFAULT_TOKEN_ENV",
    "DEFAULT_RECV_TIMEOUT_SEC",
    "DEFAULT_WS_PATH",
    "DEFAULT_WS_PING_INTERVAL",
    "DEFAULT_WS_PING_TIMEOUT",
]
