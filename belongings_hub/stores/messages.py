"""Chat message storage."""

from __future__ import annotations

import uuid

from ..models.chat import ChatMessage
from ..models.time import utc_now


class MessageStore:
    """Append-only list of chat messages; only ``is_read`` is ever updated."""

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []

    async def insert(
        self,
        *,
        sender_id: str,
        receiver_id: str,
        message: str,
        sender_model: str,
        receiver_model: str,
    ) -> ChatMessage:
        now = utc_now()
        record = ChatMessage(
            id=uuid.uuid4().hex,
            sender_id=sender_id,
            receiver_id=receiver_id,
            sender_model=sender_model,
            receiver_model=receiver_model,
            message=message,
            created_at=now,
            updated_at=now,
        )
        self._messages.append(record)
        return record

    async def between(self, user_a: str, user_b: str) -> list[ChatMessage]:
        """Messages exchanged in either direction, oldest first."""
        pair = {user_a, user_b}
        found = [
            msg for msg in self._messages
            if {msg.sender_id, msg.receiver_id} == pair
        ]
        return sorted(found, key=lambda msg: msg.created_at)

    async def involving(self, user_id: str) -> list[ChatMessage]:
        """Messages sent or received by ``user_id``, newest first."""
        found = [msg for msg in self._messages if msg.involves(user_id)]
        return sorted(reversed(found), key=lambda msg: msg.created_at, reverse=True)

    async def mark_read(self, *, sender_id: str, receiver_id: str) -> int:
        changed = 0
        now = utc_now()
        for msg in self._messages:
            if msg.sender_id == sender_id and msg.receiver_id == receiver_id and not msg.is_read:
                msg.is_read = True
                msg.updated_at = now
                changed += 1
        return changed


__all__ = ["MessageStore"]
