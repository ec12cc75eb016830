"""Gamification profile storage."""

from __future__ import annotations

from ..models.gamification import GamificationProfile


class GamificationStore:
    def __init__(self) -> None:
        self._profiles: dict[str, GamificationProfile] = {}

    async def get_or_create(self, user_id: str) -> GamificationProfile:
        profile = self._profiles.get(user_id)
        if profile is None:
            profile = GamificationProfile(user_id=user_id)
            self._profiles[user_id] = profile
        return profile


__all__ = ["GamificationStore"]
