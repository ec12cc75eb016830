"""Chat message records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .time import isoformat, utc_now


@dataclass(slots=True)
class ChatMessage:
    """A persisted direct message.

    Everything except ``is_read`` is fixed once the store has saved it.
    """

    id: str
    sender_id: str
    receiver_id: str
    sender_model: str
    receiver_model: str
    message: str
    is_read: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def involves(self, user_id: str) -> bool:
        return user_id in (self.sender_id, self.receiver_id)

    def counterpart(self, user_id: str) -> str:
        return self.receiver_id if self.sender_id == user_id else self.sender_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "senderId": self.sender_id,
            "receiverId": self.receiver_id,
            "senderModel": self.sender_model,
            "receiverModel": self.receiver_model,
            "message": self.message,
            "isRead": self.is_read,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }


@dataclass(slots=True)
class Conversation:
    """Latest message exchanged with one counterpart."""

    with_user_id: str
    last_message: ChatMessage

    def to_dict(self) -> dict[str, Any]:
        return {
            "with": self.with_user_id,
            "lastMessage": self.last_message.to_dict(),
        }


__all__ = ["ChatMessage", "Conversation"]
