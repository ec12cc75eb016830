"""Unit tests for the WebSocket routes mounted on the FastAPI app."""

from __future__ import annotations

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from belongings_hub.runtime import build_runtime_deps
from belongings_hub.security import issue_token
from belongings_hub.server import create_app
from belongings_hub.stores import MessageStore


@pytest.mark.parametrize("path", ["/", "/ws"])
def test_upgrade_without_token_closes_1008(path: str) -> None:
    with TestClient(create_app(build_runtime_deps())) as client:
        with client.websocket_connect(path) as ws:
            frame = ws.receive_json()
            with pytest.raises(WebSocketDisconnect) as exc_info:
                ws.receive_text()

    assert frame["type"] == "error"
    assert frame["error_code"] == "token_required"
    assert exc_info.value.code == 1008


def test_upgrade_with_bad_token_closes_1008() -> None:
    with TestClient(create_app(build_runtime_deps())) as client:
        with client.websocket_connect("/?token=garbage") as ws:
            frame = ws.receive_json()
            with pytest.raises(WebSocketDisconnect) as exc_info:
                ws.receive_text()

    assert frame["error_code"] == "invalid_token"
    assert exc_info.value.code == 1008


def test_authenticated_socket_relays_chat_messages() -> None:
    store = MessageStore()
    deps = build_runtime_deps(message_store=store)
    token = issue_token("u1")

    with TestClient(create_app(deps)) as client:
        with client.websocket_connect(f"/ws?token={token}") as ws:
            ws.send_json({"type": "chat_message", "receiverId": "u1", "content": "note to self"})
            relayed = ws.receive_json()
        history = client.get("/api/chat/u1", headers={"Authorization": f"Bearer {token}"}).json()

    assert relayed["type"] == "chat_message"
    assert relayed["data"]["senderId"] == "u1"
    assert relayed["data"]["message"] == "note to self"
    assert [msg["id"] for msg in history] == [relayed["data"]["id"]]
    assert deps.registry.connection_count() == 0


def test_activity_pushes_badge_earned_to_open_socket() -> None:
    deps = build_runtime_deps()
    token = issue_token("u1")
    headers = {"Authorization": f"Bearer {token}"}

    with TestClient(create_app(deps)) as client:
        with client.websocket_connect(f"/ws?token={token}") as ws:
            # a relayed self-message proves the socket is registered
            ws.send_json({"type": "chat_message", "receiverId": "u1", "content": "ready"})
            ws.receive_json()
            response = client.post("/api/activity/review", headers=headers)
            pushed = ws.receive_json()

    assert response.status_code == 200
    assert [award["badge"]["name"] for award in response.json()["awarded"]] == ["Reviewer"]
    assert pushed == {"type": "badge_earned", "data": {"badgeName": "Reviewer"}}
