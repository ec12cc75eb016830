"""Good-owner score and gamification profile reads."""

from __future__ import annotations

import logging

from ..config.badges import SCORE_WEIGHTS
from ..models.gamification import GamificationProfile
from ..stores.activity import ActivityStore
from ..stores.gamification import GamificationStore

logger = logging.getLogger(__name__)


class GamificationService:
    def __init__(self, store: GamificationStore, activity: ActivityStore) -> None:
        self._store = store
        self._activity = activity

    async def get_gamification_data(self, user_id: str) -> GamificationProfile:
        """Profile for ``user_id``, created with defaults on first read."""
        return await self._store.get_or_create(user_id)

    async def calculate_good_owner_score(self, user_id: str) -> int:
        """Recompute and store the weighted activity score."""
        score = 0
        for kind, weight in SCORE_WEIGHTS.items():
            score += await self._activity.count(user_id, kind) * weight
        profile = await self._store.get_or_create(user_id)
        profile.good_owner_score = score
        logger.info("good owner score updated: user_id=%s score=%s", user_id, score)
        return score


__all__ = ["GamificationService"]
