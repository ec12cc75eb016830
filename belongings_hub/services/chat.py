"""Chat persistence and history queries.

``save_message`` is the collaborator the WebSocket relay awaits before it
forwards a frame, so a message is always in history before any recipient
sees it in real time.
"""

from __future__ import annotations

import logging

from ..config.chat import CHAT_PUSH_TITLE, PARTICIPANT_KINDS
from ..errors import ValidationError
from ..models.chat import ChatMessage, Conversation
from ..stores.messages import MessageStore
from .push import PushNotifier

logger = logging.getLogger(__name__)


def _require_id(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("invalid_" + field_name, f"'{field_name}' must be a non-empty string")
    return value


def _require_kind(value: object, field_name: str) -> str:
    if value not in PARTICIPANT_KINDS:
        raise ValidationError(
            "invalid_" + field_name,
            f"'{field_name}' must be one of {', '.join(PARTICIPANT_KINDS)}",
        )
    return value  # type: ignore[return-value]


class ChatService:
    """Saves chat messages and answers history/conversation reads."""

    def __init__(self, store: MessageStore, push_notifier: PushNotifier) -> None:
        self._store = store
        self._push = push_notifier

    async def save_message(
        self,
        *,
        sender_id: str,
        receiver_id: str,
        message: str,
        sender_model: str,
        receiver_model: str,
    ) -> ChatMessage:
        """Persist a message, then notify the receiver's devices.

        Raises:
            ValidationError: Missing ids, empty body or unknown participant kind.
        """
        _require_id(sender_id, "sender_id")
        _require_id(receiver_id, "receiver_id")
        _require_kind(sender_model, "sender_model")
        _require_kind(receiver_model, "receiver_model")
        if not isinstance(message, str) or not message:
            raise ValidationError("invalid_message", "'message' must be a non-empty string")

        record = await self._store.insert(
            sender_id=sender_id,
            receiver_id=receiver_id,
            message=message,
            sender_model=sender_model,
            receiver_model=receiver_model,
        )
        logger.info(
            "chat: saved message id=%s sender_id=%s receiver_id=%s",
            record.id,
            sender_id,
            receiver_id,
        )

        try:
            await self._push.send(receiver_id, CHAT_PUSH_TITLE, message)
        except Exception:  # noqa: BLE001
            logger.warning("chat: push notification failed for receiver_id=%s", receiver_id, exc_info=True)

        return record

    async def get_chat_history(self, user_a: str, user_b: str) -> list[ChatMessage]:
        return await self._store.between(user_a, user_b)

    async def get_conversations(self, user_id: str) -> list[Conversation]:
        """One entry per counterpart holding the latest message, newest first."""
        conversations: dict[str, Conversation] = {}
        for msg in await self._store.involving(user_id):
            other = msg.counterpart(user_id)
            if other not in conversations:
                conversations[other] = Conversation(with_user_id=other, last_message=msg)
        return list(conversations.values())

    async def mark_conversation_read(self, reader_id: str, other_id: str) -> int:
        """Mark everything ``other_id`` sent to ``reader_id`` as read."""
        changed = await self._store.mark_read(sender_id=other_id, receiver_id=reader_id)
        if changed:
            logger.info("chat: marked %s message(s) read reader_id=%s other_id=%s", changed, reader_id, other_id)
        return changed


__all__ = ["ChatService"]
