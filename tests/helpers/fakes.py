"""In-memory stand-ins for sockets and collaborators used by unit tests."""

from __future__ import annotations

import json
from typing import Any
from collections.abc import Callable

from fastapi import WebSocketDisconnect

from belongings_hub.errors import PersistenceError
from belongings_hub.stores import MessageStore


class FakeWebSocket:
    """Records accept/send/close calls and replays queued inbound frames.

    Once the queue is empty ``receive`` reports a client disconnect, which
    ends the relay's message loop.
    """

    def __init__(
        self,
        *,
        query_params: dict[str, str] | None = None,
        frames: list[str | bytes] | None = None,
        on_receive: Callable[[], None] | None = None,
        fail_sends: bool = False,
        send_error: BaseException | None = None,
    ) -> None:
        self.query_params = dict(query_params or {})
        self.accepted = False
        self.sent: list[str] = []
        self.close_calls: list[tuple[int, str | None]] = []
        self._frames: list[str | bytes] = list(frames or [])
        self._on_receive = on_receive
        self._fail_sends = fail_sends
        self._send_error = send_error

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, text: str) -> None:
        if self._fail_sends:
            raise WebSocketDisconnect(code=1006)
        if self._send_error is not None:
            raise self._send_error
        self.sent.append(text)

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        self.close_calls.append((code, reason))

    async def receive(self) -> dict[str, Any]:
        if self._on_receive is not None:
            self._on_receive()
        if not self._frames:
            return {"type": "websocket.disconnect", "code": 1000}
        frame = self._frames.pop(0)
        if isinstance(frame, bytes):
            return {"type": "websocket.receive", "bytes": frame}
        return {"type": "websocket.receive", "text": frame}

    def sent_json(self) -> list[dict[str, Any]]:
        return [json.loads(text) for text in self.sent]


def chat_frame(receiver_id: Any, content: Any = "hi") -> str:
    return json.dumps({"type": "chat_message", "receiverId": receiver_id, "content": content})


class RecordingPushNotifier:
    def __init__(self, *, fail: bool = False) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self._fail = fail

    async def send(self, user_id: str, title: str, body: str) -> None:
        self.calls.append((user_id, title, body))
        if self._fail:
            raise ConnectionError("push gateway unavailable")


class FailingMessageStore(MessageStore):
    """Message store whose writes always fail."""

    async def insert(self, **kwargs: Any):
        raise PersistenceError("database unavailable")


__all__ = [
    "FakeWebSocket",
    "chat_frame",
    "RecordingPushNotifier",
    "FailingMessageStore",
]
