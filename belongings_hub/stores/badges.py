"""Badge catalogue and earned-badge storage."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from ..models.badges import Badge, UserBadge


class BadgeStore:
    """Holds the badge catalogue plus the (user, badge) award records."""

    def __init__(self, catalogue: Iterable[Badge] = ()) -> None:
        self._badges: dict[str, Badge] = {badge.name: badge for badge in catalogue}
        self._awards: dict[tuple[str, str], UserBadge] = {}

    async def get_badge(self, name: str) -> Badge | None:
        return self._badges.get(name)

    async def all_badges(self) -> list[Badge]:
        return list(self._badges.values())

    async def find_award(self, user_id: str, badge_name: str) -> UserBadge | None:
        return self._awards.get((user_id, badge_name))

    async def insert_award(self, user_id: str, badge: Badge) -> UserBadge | None:
        """Record an award; returns None when the user already holds it."""
        key = (user_id, badge.name)
        if key in self._awards:
            return None
        award = UserBadge(id=uuid.uuid4().hex, user_id=user_id, badge=badge)
        self._awards[key] = award
        return award

    async def awards_for(self, user_id: str) -> list[UserBadge]:
        """Badges earned by ``user_id``, newest first."""
        found = [award for (owner, _), award in self._awards.items() if owner == user_id]
        return sorted(reversed(found), key=lambda award: award.earned_at, reverse=True)


__all__ = ["BadgeStore"]
