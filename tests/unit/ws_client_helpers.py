"""Unit tests for websocket client helper utilities."""

from __future__ import annotations

import asyncio
from urllib.parse import parse_qs, urlsplit

import pytest

from tests.helpers.websocket import ws as ws_helpers


def _build_async_receiver(method_name: str, value: str):
    async def _receiver(_self):
        return value

    return type("Receiver", (), {method_name: _receiver})()


def test_with_token_normalizes_scheme_path_and_query() -> None:
    url = ws_helpers.with_token("http://localhost:3000", token="abc123")

    parts = urlsplit(url)
    assert parts.scheme == "ws"
    assert parts.netloc == "localhost:3000"
    assert parts.path == "/ws"
    assert parse_qs(parts.query) == {"token": ["abc123"]}


def test_with_token_preserves_query_and_replaces_existing_token() -> None:
    url = ws_helpers.with_token("wss://relay.example.com/custom?foo=1&token=old", token="new")

    parts = urlsplit(url)
    assert parts.scheme == "wss"
    assert parts.path == "/custom"
    assert parse_qs(parts.query) == {"foo": ["1"], "token": ["new"]}


def test_with_token_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BELONGINGS_HUB_TOKEN", "from-env")
    url = ws_helpers.with_token("ws://localhost:3000")
    assert parse_qs(urlsplit(url).query) == {"token": ["from-env"]}


def test_with_token_requires_token_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BELONGINGS_HUB_TOKEN", raising=False)
    with pytest.raises(ValueError, match="BELONGINGS_HUB_TOKEN"):
        ws_helpers.with_token("ws://localhost:3000/ws")


def test_recv_raw_uses_receive_if_available() -> None:
    receiver = _build_async_receiver("receive", "payload-from-receive")
    assert asyncio.run(ws_helpers.recv_raw(receiver)) == "payload-from-receive"


def test_recv_raw_uses_recv_when_receive_is_unavailable() -> None:
    receiver = _build_async_receiver("recv", "payload-from-recv")
    assert asyncio.run(ws_helpers.recv_raw(receiver, timeout=1.0)) == "payload-from-recv"
