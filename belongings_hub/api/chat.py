"""Chat history routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..runtime.dependencies import RuntimeDeps
from ..security.tokens import TokenPayload
from .deps import get_current_user, get_runtime_deps

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.get("/conversations")
async def get_conversations(
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> list[dict[str, Any]]:
    """Latest message per counterpart, newest first."""
    conversations = await deps.chat_service.get_conversations(user.user_id)
    return [conversation.to_dict() for conversation in conversations]


@router.get("/{other_user_id}")
async def get_chat_history(
    other_user_id: str,
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> list[dict[str, Any]]:
    history = await deps.chat_service.get_chat_history(user.user_id, other_user_id)
    return [msg.to_dict() for msg in history]


@router.post("/{other_user_id}/read")
async def mark_conversation_read(
    other_user_id: str,
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, int]:
    updated = await deps.chat_service.mark_conversation_read(user.user_id, other_user_id)
    return {"updated": updated}


__all__ = ["router"]
