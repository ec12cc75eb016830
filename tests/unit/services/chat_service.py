"""Unit tests for chat persistence and history reads."""

from __future__ import annotations

import asyncio

import pytest

from belongings_hub.errors import ValidationError
from belongings_hub.services import ChatService
from belongings_hub.stores import MessageStore
from tests.helpers.fakes import RecordingPushNotifier


def _service(push: RecordingPushNotifier | None = None) -> tuple[ChatService, RecordingPushNotifier]:
    push = push or RecordingPushNotifier()
    return ChatService(MessageStore(), push), push


async def _send(service: ChatService, sender: str, receiver: str, text: str):
    return await service.save_message(
        sender_id=sender,
        receiver_id=receiver,
        message=text,
        sender_model="User",
        receiver_model="User",
    )


def test_save_message_persists_and_pushes() -> None:
    service, push = _service()

    record = asyncio.run(_send(service, "u1", "u2", "hi"))

    assert record.sender_id == "u1"
    assert record.receiver_id == "u2"
    assert record.is_read is False
    assert push.calls == [("u2", "New Message", "hi")]
    data = record.to_dict()
    assert data["senderId"] == "u1"
    assert data["createdAt"].endswith("Z")


def test_save_message_survives_push_failure() -> None:
    service, push = _service(RecordingPushNotifier(fail=True))

    record = asyncio.run(_send(service, "u1", "u2", "hi"))

    assert record.message == "hi"
    assert len(push.calls) == 1


def test_save_message_rejects_unknown_participant_kind() -> None:
    service, _ = _service()

    async def _run() -> None:
        await service.save_message(
            sender_id="u1",
            receiver_id="u2",
            message="hi",
            sender_model="Robot",
            receiver_model="User",
        )

    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(_run())
    assert exc_info.value.error_code == "invalid_sender_model"


def test_save_message_rejects_empty_body() -> None:
    service, push = _service()
    with pytest.raises(ValidationError):
        asyncio.run(_send(service, "u1", "u2", ""))
    assert push.calls == []


def test_history_is_both_directions_oldest_first() -> None:
    service, _ = _service()

    async def _run():
        await _send(service, "u1", "u2", "one")
        await _send(service, "u2", "u1", "two")
        await _send(service, "u1", "u3", "elsewhere")
        await _send(service, "u1", "u2", "three")
        return await service.get_chat_history("u2", "u1")

    history = asyncio.run(_run())
    assert [msg.message for msg in history] == ["one", "two", "three"]


def test_conversations_hold_latest_message_per_counterpart() -> None:
    service, _ = _service()

    async def _run():
        await _send(service, "u1", "u2", "old")
        await _send(service, "u3", "u1", "from three")
        await _send(service, "u2", "u1", "latest with two")
        return await service.get_conversations("u1")

    conversations = asyncio.run(_run())
    assert [(c.with_user_id, c.last_message.message) for c in conversations] == [
        ("u2", "latest with two"),
        ("u3", "from three"),
    ]
    assert conversations[0].to_dict()["with"] == "u2"


def test_mark_conversation_read_only_flips_inbound() -> None:
    service, _ = _service()

    async def _run():
        await _send(service, "u2", "u1", "a")
        await _send(service, "u2", "u1", "b")
        await _send(service, "u1", "u2", "c")
        first = await service.mark_conversation_read("u1", "u2")
        second = await service.mark_conversation_read("u1", "u2")
        history = await service.get_chat_history("u1", "u2")
        return first, second, history

    first, second, history = asyncio.run(_run())
    assert (first, second) == (2, 0)
    assert [msg.is_read for msg in history] == [True, True, False]
