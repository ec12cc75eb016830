"""Unit tests for chat relay through the WebSocket message loop."""

from __future__ import annotations

import json
import asyncio

from belongings_hub.handlers.connections import ConnectionRegistry
from belongings_hub.handlers.websocket.manager import handle_websocket_connection
from belongings_hub.runtime import build_runtime_deps
from belongings_hub.security import issue_token
from belongings_hub.stores import MessageStore
from tests.helpers.fakes import FailingMessageStore, FakeWebSocket, chat_frame


def _connect(user_id: str, frames: list[str | bytes]) -> FakeWebSocket:
    return FakeWebSocket(query_params={"token": issue_token(user_id)}, frames=frames)


def _stored(store: MessageStore) -> int:
    return len(asyncio.run(store.between("u1", "u2")))


def test_chat_message_is_persisted_and_forwarded() -> None:
    registry = ConnectionRegistry()
    store = MessageStore()
    deps = build_runtime_deps(registry=registry, message_store=store)
    bob = FakeWebSocket()
    registry.register("u2", bob)
    alice = _connect("u1", [chat_frame("u2", "hi")])

    asyncio.run(handle_websocket_connection(alice, deps))

    history = asyncio.run(store.between("u1", "u2"))
    assert len(history) == 1
    record = history[0]
    assert (record.sender_id, record.receiver_id, record.message) == ("u1", "u2", "hi")
    assert bob.sent_json() == [{"type": "chat_message", "data": record.to_dict()}]
    assert alice.sent == []


def test_chat_message_to_offline_user_is_stored_only() -> None:
    store = MessageStore()
    deps = build_runtime_deps(message_store=store)
    alice = _connect("u1", [chat_frame("u2", "are you there?")])

    asyncio.run(handle_websocket_connection(alice, deps))

    assert _stored(store) == 1
    assert alice.sent == []
    assert alice.close_calls == []


def test_after_recipient_disconnects_messages_still_persist() -> None:
    registry = ConnectionRegistry()
    store = MessageStore()
    deps = build_runtime_deps(registry=registry, message_store=store)
    bob = _connect("u2", [])
    asyncio.run(handle_websocket_connection(bob, deps))

    alice = _connect("u1", [chat_frame("u2", "hi again")])
    asyncio.run(handle_websocket_connection(alice, deps))

    assert _stored(store) == 1
    assert bob.sent == []


def test_malformed_frames_are_dropped_silently() -> None:
    registry = ConnectionRegistry()
    store = MessageStore()
    deps = build_runtime_deps(registry=registry, message_store=store)
    bob = FakeWebSocket()
    registry.register("u2", bob)
    alice = _connect(
        "u1",
        [
            "{not json",
            "[1, 2, 3]",
            json.dumps({"receiverId": "u2"}),
            chat_frame("", "no receiver"),
            chat_frame("u2", 42),
            b"\xff\xfe",
            chat_frame("u2", "still here"),
        ],
    )

    asyncio.run(handle_websocket_connection(alice, deps))

    assert alice.sent == []
    assert alice.close_calls == []
    assert [frame["data"]["message"] for frame in bob.sent_json()] == ["still here"]
    assert _stored(store) == 1


def test_badge_earned_and_unknown_types_are_ignored() -> None:
    registry = ConnectionRegistry()
    store = MessageStore()
    deps = build_runtime_deps(registry=registry, message_store=store)
    bob = FakeWebSocket()
    registry.register("u2", bob)
    alice = _connect(
        "u1",
        [
            json.dumps({"type": "badge_earned", "data": {"badgeName": "Reviewer"}}),
            json.dumps({"type": "typing", "receiverId": "u2"}),
        ],
    )

    asyncio.run(handle_websocket_connection(alice, deps))

    assert bob.sent == []
    assert alice.sent == []
    assert _stored(store) == 0


def test_message_type_must_match_exactly() -> None:
    registry = ConnectionRegistry()
    store = MessageStore()
    deps = build_runtime_deps(registry=registry, message_store=store)
    bob = FakeWebSocket()
    registry.register("u2", bob)
    frames = [
        json.dumps({"type": "CHAT_MESSAGE", "receiverId": "u2", "content": "hey"}),
        json.dumps({"type": " chat_message", "receiverId": "u2", "content": "hey"}),
    ]

    asyncio.run(handle_websocket_connection(_connect("u1", frames), deps))

    assert bob.sent == []
    assert _stored(store) == 0


def test_persistence_failure_keeps_sender_open_and_skips_forward() -> None:
    registry = ConnectionRegistry()
    deps = build_runtime_deps(registry=registry, message_store=FailingMessageStore())
    bob = FakeWebSocket()
    registry.register("u2", bob)
    alice = _connect("u1", [chat_frame("u2", "lost"), chat_frame("u2", "also lost")])

    asyncio.run(handle_websocket_connection(alice, deps))

    assert bob.sent == []
    assert alice.sent == []
    assert alice.close_calls == []
    assert registry.lookup("u1") is None


def test_recipient_send_failure_does_not_affect_sender() -> None:
    registry = ConnectionRegistry()
    store = MessageStore()
    deps = build_runtime_deps(registry=registry, message_store=store)
    registry.register("u2", FakeWebSocket(fail_sends=True))
    alice = _connect("u1", [chat_frame("u2", "one"), chat_frame("u2", "two")])

    asyncio.run(handle_websocket_connection(alice, deps))

    assert _stored(store) == 2
    assert alice.close_calls == []
