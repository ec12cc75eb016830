"""Gamification profile and good-owner score routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..runtime.dependencies import RuntimeDeps
from ..security.tokens import TokenPayload
from .deps import get_current_user, get_runtime_deps

router = APIRouter(prefix="/api/gamification", tags=["gamification"])


@router.get("")
async def get_gamification_data(
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, Any]:
    profile = await deps.gamification_service.get_gamification_data(user.user_id)
    return profile.to_dict()


@router.get("/good-owner-score")
async def calculate_good_owner_score(
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, int]:
    """Recompute the caller's score from recorded activity."""
    score = await deps.gamification_service.calculate_good_owner_score(user.user_id)
    return {"score": score}


__all__ = ["router"]
