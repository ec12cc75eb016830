"""WebSocket message loop and dispatch helpers.

Inbound frame handling for an authenticated connection:

    chat_message  - persist through the chat service, then forward to the
                    recipient if this process holds a socket for them
    badge_earned  - server-to-client only; ignored when received
    anything else - ignored

Nothing here ever answers the sender. Malformed frames, invalid payloads,
offline recipients and persistence failures are all logged and dropped while
the connection stays open.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Awaitable, Callable

from fastapi import WebSocket, WebSocketDisconnect

from .parser import parse_chat_payload, parse_client_message
from .helpers import build_event, safe_send_json
from ...errors import ValidationError, classify_error
from ...config.chat import DEFAULT_PARTICIPANT_KIND
from ...config.websocket import WS_CLOSE_NORMAL_CODE, WS_MSG_BADGE_EARNED, WS_MSG_CHAT
from ...models.chat import ChatMessage
from ...runtime.dependencies import RuntimeDeps
from ...telemetry.sentry import capture_error
from ...telemetry.instruments import get_metrics

logger = logging.getLogger(__name__)

MessageHandlerFn = Callable[[dict[str, Any], str, RuntimeDeps], Awaitable[None]]


async def receive_frame(ws: WebSocket) -> str | None:
    """Wait for the next data frame and return it as text.

    Binary frames are decoded as UTF-8; undecodable ones return None.

    Raises:
        WebSocketDisconnect: The client closed the connection.
    """
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(
            code=message.get("code", WS_CLOSE_NORMAL_CODE),
            reason=message.get("reason"),
        )
    text = message.get("text")
    if text is not None:
        return text
    data = message.get("bytes")
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("WS recv: dropping undecodable binary frame (%s bytes)", len(data))
        return None


def _drop(reason: str) -> None:
    get_metrics().messages_dropped_total.add(1, {"reason": reason})


async def _persist_chat_message(
    sender_id: str,
    receiver_id: str,
    content: str,
    runtime_deps: RuntimeDeps,
) -> ChatMessage | None:
    try:
        record = await runtime_deps.chat_service.save_message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            message=content,
            sender_model=DEFAULT_PARTICIPANT_KIND,
            receiver_model=DEFAULT_PARTICIPANT_KIND,
        )
    except ValidationError as exc:
        logger.warning("WS chat_message rejected by chat service: %s (%s)", exc.message, exc.error_code)
        _drop("invalid_payload")
        return None
    except Exception as exc:  # noqa: BLE001
        logger.exception("WS chat_message persistence failed receiver_id=%s", receiver_id)
        get_metrics().errors_total.add(1, {"category": classify_error(exc)})
        capture_error(exc, extra={"receiver_id": receiver_id})
        _drop("persistence_failed")
        return None
    get_metrics().messages_persisted_total.add(1)
    return record


async def _forward_chat_message(record: ChatMessage, runtime_deps: RuntimeDeps) -> bool:
    recipient = runtime_deps.registry.lookup(record.receiver_id)
    if recipient is None:
        logger.info("WS chat_message id=%s stored; receiver_id=%s not connected", record.id, record.receiver_id)
        _drop("recipient_offline")
        return False
    try:
        sent = await safe_send_json(recipient, build_event(WS_MSG_CHAT, record.to_dict()))
    except Exception as exc:  # noqa: BLE001
        logger.warning("WS chat_message forward failed receiver_id=%s", record.receiver_id, exc_info=True)
        capture_error(exc, extra={"receiver_id": record.receiver_id})
        sent = False
    if sent:
        get_metrics().messages_relayed_total.add(1)
        logger.info("WS chat_message id=%s relayed to receiver_id=%s", record.id, record.receiver_id)
    else:
        _drop("send_failed")
    return sent


async def handle_chat_message(msg: dict[str, Any], user_id: str, runtime_deps: RuntimeDeps) -> None:
    """Persist a chat frame from ``user_id`` and relay it to the recipient."""
    try:
        receiver_id, content = parse_chat_payload(msg)
    except ValidationError as exc:
        logger.warning("WS chat_message dropped: %s (%s)", exc.message, exc.error_code)
        _drop("invalid_payload")
        return

    logger.info("WS recv: chat_message receiver_id=%s len(content)=%s", receiver_id, len(content))
    record = await _persist_chat_message(user_id, receiver_id, content, runtime_deps)
    if record is None:
        return
    await _forward_chat_message(record, runtime_deps)


async def handle_badge_earned(msg: dict[str, Any], user_id: str, runtime_deps: RuntimeDeps) -> None:
    """The server only emits badge_earned; inbound copies are ignored."""
    logger.debug("WS recv: badge_earned ignored (server-emitted type)")


_MESSAGE_HANDLERS: dict[str, MessageHandlerFn] = {
    WS_MSG_CHAT: handle_chat_message,
    WS_MSG_BADGE_EARNED: handle_badge_earned,
}


def _parse_message_or_drop(raw_msg: str) -> dict[str, Any] | None:
    try:
        return parse_client_message(raw_msg)
    except ValueError as exc:
        logger.warning("WS recv: failed to process message: %s", exc)
        _drop("malformed")
        return None


async def dispatch_message(msg: dict[str, Any], user_id: str, runtime_deps: RuntimeDeps) -> None:
    msg_type = msg["type"]
    handler = _MESSAGE_HANDLERS.get(msg_type)
    if handler is None:
        logger.debug("WS recv: ignoring unsupported message type %r", msg_type)
        return
    await handler(msg, user_id, runtime_deps)


async def run_message_loop(ws: WebSocket, user_id: str, runtime_deps: RuntimeDeps) -> None:
    """Receive, validate, and dispatch client frames until disconnect.

    Raises:
        WebSocketDisconnect: The client closed the connection.
    """
    while True:
        raw_msg = await receive_frame(ws)
        if raw_msg is None:
            continue
        msg = _parse_message_or_drop(raw_msg)
        if msg is None:
            continue
        await dispatch_message(msg, user_id, runtime_deps)


__all__ = [
    "receive_frame",
    "handle_chat_message",
    "handle_badge_earned",
    "dispatch_message",
    "run_message_loop",
]
