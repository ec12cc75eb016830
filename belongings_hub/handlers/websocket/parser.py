"""Client frame parsing for the WebSocket relay."""

from __future__ import annotations

import json
from typing import Any

from ...errors import ValidationError


def parse_client_message(raw: str) -> dict[str, Any]:
    """Decode a text frame into a message dict.

    ``type`` is kept verbatim; dispatch matches it exactly.

    Raises:
        ValueError: Empty frame, invalid JSON, non-object JSON or no type.
    """

    text = (raw or "").strip()
    if not text:
        raise ValueError("Empty message.")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError("Message must be valid JSON.") from exc

    if not isinstance(data, dict):
        raise ValueError("Message must be a JSON object.")

    msg_type = data.get("type")
    if not isinstance(msg_type, str) or not msg_type:
        raise ValueError("Missing 'type' in message.")

    return data


def parse_chat_payload(msg: dict[str, Any]) -> tuple[str, str]:
    """Extract ``(receiverId, content)`` from a ``chat_message`` frame.

    Raises:
        ValidationError: receiverId is not a non-empty string or content is
            not a string.
    """
    receiver_id = msg.get("receiverId")
    if not isinstance(receiver_id, str) or not receiver_id.strip():
        raise ValidationError("invalid_receiver_id", "'receiverId' must be a non-empty string")
    content = msg.get("content")
    if not isinstance(content, str):
        raise ValidationError("invalid_content", "'content' must be a string")
    return receiver_id.strip(), content


__all__ = ["parse_client_message", "parse_chat_payload"]
