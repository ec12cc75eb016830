"""Registry of live WebSocket connections keyed by user id.

The registry answers one question: "does this process currently hold a
socket for user U?". It is advisory only:

- Absence does not mean the user is offline; they may be connected to a
  different process instance.
- Presence does not guarantee delivery; a send on a socket that is closing
  can still fail.

One connection per user. A new handshake for the same user replaces the
entry (last writer wins) and the replaced socket is left open; the caller
decides what to do with it. The table is never persisted, so every entry is
lost on restart.

Example:
    registry = ConnectionRegistry()

    async def handle_websocket(ws: WebSocket, user_id: str):
        registry.register(user_id, ws)
        try:
            # Handle messages...
        finally:
            registry.unregister(user_id, ws)
"""

from __future__ import annotations

import logging

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Maps authenticated user ids to their active WebSocket.

    All mutations happen on the event loop thread, so no lock is needed.

    Attributes:
        _clients: user id -> registered WebSocket.
    """

    def __init__(self) -> None:
        self._clients: dict[str, WebSocket] = {}

    def register(self, user_id: str, websocket: WebSocket) -> WebSocket | None:
        """Register ``websocket`` for ``user_id``, replacing any prior entry.

        Returns:
            The socket that was replaced, or None.
        """
        previous = self._clients.get(user_id)
        self._clients[user_id] = websocket
        if previous is not None and previous is not websocket:
            logger.info("Connection replaced for user_id=%s (previous socket left open)", user_id)
        else:
            previous = None
        logger.info("Connection registered: user_id=%s active=%s", user_id, len(self._clients))
        return previous

    def lookup(self, user_id: str) -> WebSocket | None:
        return self._clients.get(user_id)

    def get_client(self, user_id: str) -> WebSocket | None:
        """Socket for ``user_id``; the lookup used by push adapters."""
        return self.lookup(user_id)

    def unregister(self, user_id: str, websocket: WebSocket | None = None) -> bool:
        """Remove the entry for ``user_id`` if present.

        Args:
            user_id: The user whose entry should go.
            websocket: When given, only remove the entry if it still points
                at this socket. A stale connection closing after its user
                reconnected must not evict the newer socket.

        Returns:
            True if an entry was removed.
        """
        current = self._clients.get(user_id)
        if current is None:
            return False
        if websocket is not None and current is not websocket:
            logger.info("Connection for user_id=%s already replaced; keeping newer socket", user_id)
            return False
        del self._clients[user_id]
        logger.info("Connection removed: user_id=%s active=%s", user_id, len(self._clients))
        return True

    def is_connected(self, user_id: str) -> bool:
        return user_id in self._clients

    def connection_count(self) -> int:
        return len(self._clients)

    def connected_user_ids(self) -> list[str]:
        return list(self._clients)


__all__ = ["ConnectionRegistry"]
