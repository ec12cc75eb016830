"""Unit tests for the per-process connection registry."""

from __future__ import annotations

from belongings_hub.handlers.connections import ConnectionRegistry
from tests.helpers.fakes import FakeWebSocket


def test_lookup_returns_registered_socket() -> None:
    registry = ConnectionRegistry()
    ws = FakeWebSocket()
    assert registry.register("u1", ws) is None
    assert registry.lookup("u1") is ws
    assert registry.get_client("u1") is ws
    assert registry.is_connected("u1")


def test_lookup_unknown_user_is_absent() -> None:
    assert ConnectionRegistry().lookup("nobody") is None


def test_unregister_removes_entry() -> None:
    registry = ConnectionRegistry()
    ws = FakeWebSocket()
    registry.register("u1", ws)
    assert registry.unregister("u1", ws) is True
    assert registry.lookup("u1") is None
    assert registry.connection_count() == 0


def test_unregister_without_socket_removes_any_entry() -> None:
    registry = ConnectionRegistry()
    registry.register("u1", FakeWebSocket())
    assert registry.unregister("u1") is True
    assert registry.unregister("u1") is False


def test_second_registration_replaces_without_closing() -> None:
    registry = ConnectionRegistry()
    first, second = FakeWebSocket(), FakeWebSocket()
    registry.register("u1", first)

    replaced = registry.register("u1", second)

    assert replaced is first
    assert registry.lookup("u1") is second
    assert first.close_calls == []
    assert registry.connection_count() == 1


def test_stale_socket_close_keeps_newer_entry() -> None:
    registry = ConnectionRegistry()
    first, second = FakeWebSocket(), FakeWebSocket()
    registry.register("u1", first)
    registry.register("u1", second)

    assert registry.unregister("u1", first) is False
    assert registry.lookup("u1") is second


def test_connected_user_ids() -> None:
    registry = ConnectionRegistry()
    registry.register("u1", FakeWebSocket())
    registry.register("u2", FakeWebSocket())
    assert sorted(registry.connected_user_ids()) == ["u1", "u2"]
