"""Badge catalogue and per-user badge routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..runtime.dependencies import RuntimeDeps
from ..security.tokens import TokenPayload
from .deps import get_current_user, get_runtime_deps

router = APIRouter(prefix="/api/badges", tags=["badges"])


@router.get("")
async def get_all_badges(
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> list[dict[str, Any]]:
    badges = await deps.badge_service.get_all_badges()
    return [badge.to_dict() for badge in badges]


@router.get("/my-badges")
async def get_user_badges(
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> list[dict[str, Any]]:
    awards = await deps.badge_service.get_user_badges(user.user_id)
    return [award.to_dict() for award in awards]


__all__ = ["router"]
