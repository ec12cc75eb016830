"""Activity recording route; feeds badge triggers and the good-owner score."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..errors import ValidationError
from ..runtime.dependencies import RuntimeDeps
from ..security.tokens import TokenPayload
from .deps import get_current_user, get_runtime_deps

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/activity", tags=["activity"])


@router.post("/{kind}")
async def record_activity(
    kind: str,
    user: TokenPayload = Depends(get_current_user),
    deps: RuntimeDeps = Depends(get_runtime_deps),
) -> dict[str, Any]:
    """Count one catalogue action and award any badges it unlocks.

    Newly earned badges are pushed as ``badge_earned`` frames to the caller's
    socket when one is connected to this process.
    """
    try:
        count = await deps.activity.record(user.user_id, kind)
    except ValidationError as exc:
        logger.info("activity rejected: %s (%s)", exc.message, exc.error_code)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    awards = await deps.badge_service.award_for_activity(user.user_id, kind)
    return {
        "kind": kind,
        "count": count,
        "awarded": [award.to_dict() for award in awards],
    }


__all__ = ["router"]
