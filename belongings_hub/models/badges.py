"""Badge catalogue entries and earned badges."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .time import isoformat, utc_now


@dataclass(frozen=True, slots=True)
class Badge:
    name: str
    description: str
    icon: str
    criteria: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "criteria": self.criteria,
        }


@dataclass(frozen=True, slots=True)
class UserBadge:
    """A badge earned by a user. One per (user, badge)."""

    id: str
    user_id: str
    badge: Badge
    earned_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user": self.user_id,
            "badge": self.badge.to_dict(),
            "earnedAt": isoformat(self.earned_at),
        }


__all__ = ["Badge", "UserBadge"]
