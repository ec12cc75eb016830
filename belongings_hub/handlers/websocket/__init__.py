"""WebSocket handler exports."""

from .auth import authenticate_websocket, extract_token
from .manager import handle_websocket_connection

__all__ = [
    "authenticate_websocket",
    "extract_token",
    "handle_websocket_connection",
]
