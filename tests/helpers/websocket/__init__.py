"""WebSocket utilities for test clients."""

from .ws import recv_raw, with_token, connect_with_retries

__all__ = [
    "connect_with_retries",
    "recv_raw",
    "with_token",
]
