"""Badge awarding driven by user activity."""

from __future__ import annotations

import logging
from typing import Protocol

from ..config.badges import BADGE_TRIGGERS
from ..errors import ValidationError
from ..models.badges import Badge, UserBadge
from ..stores.activity import ActivityStore
from ..stores.badges import BadgeStore

logger = logging.getLogger(__name__)


class BadgeNotifier(Protocol):
    async def push_badge_earned(self, user_id: str, badge_name: str) -> bool: ...


class BadgeService:
    """Evaluates triggers, records awards and pushes ``badge_earned`` events."""

    def __init__(
        self,
        store: BadgeStore,
        activity: ActivityStore,
        notifier: BadgeNotifier,
    ) -> None:
        self._store = store
        self._activity = activity
        self._notifier = notifier

    async def check_and_award_badges(self, user_id: str, trigger: str) -> UserBadge | None:
        """Award the badge tied to ``trigger`` once its threshold is reached.

        Raises:
            ValidationError: Unknown trigger.
        """
        rule = BADGE_TRIGGERS.get(trigger)
        if rule is None:
            raise ValidationError("invalid_trigger", f"unknown badge trigger '{trigger}'")
        badge_name, activity_kind, threshold = rule

        if await self._store.find_award(user_id, badge_name) is not None:
            return None
        count = await self._activity.count(user_id, activity_kind)
        if count < threshold:
            logger.debug(
                "badge %r not yet earned by user_id=%s (%s/%s %s)",
                badge_name,
                user_id,
                count,
                threshold,
                activity_kind,
            )
            return None
        return await self.award_badge(user_id, badge_name)

    async def award_for_activity(self, user_id: str, activity_kind: str) -> list[UserBadge]:
        """Evaluate every trigger fed by ``activity_kind`` and return new awards."""
        awards: list[UserBadge] = []
        for trigger, (_, kind, _) in BADGE_TRIGGERS.items():
            if kind != activity_kind:
                continue
            award = await self.check_and_award_badges(user_id, trigger)
            if award is not None:
                awards.append(award)
        return awards

    async def award_badge(self, user_id: str, badge_name: str) -> UserBadge | None:
        """Record ``badge_name`` for ``user_id`` and push the event.

        Returns None when the badge does not exist or was already earned.
        """
        badge = await self._store.get_badge(badge_name)
        if badge is None:
            logger.warning("award_badge: unknown badge %r", badge_name)
            return None
        award = await self._store.insert_award(user_id, badge)
        if award is None:
            return None
        logger.info("badge awarded: user_id=%s badge=%r", user_id, badge_name)
        await self._notifier.push_badge_earned(user_id, badge_name)
        return award

    async def get_user_badges(self, user_id: str) -> list[UserBadge]:
        return await self._store.awards_for(user_id)

    async def get_all_badges(self) -> list[Badge]:
        return await self._store.all_badges()


__all__ = ["BadgeNotifier", "BadgeService"]
