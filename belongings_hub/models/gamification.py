"""Per-user gamification profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config.badges import DEFAULT_XP, DEFAULT_LEVEL


@dataclass(slots=True)
class GamificationProfile:
    user_id: str
    xp: int = DEFAULT_XP
    level: int = DEFAULT_LEVEL
    good_owner_score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "user": self.user_id,
            "xp": self.xp,
            "level": self.level,
            "goodOwnerScore": self.good_owner_score,
        }


__all__ = ["GamificationProfile"]
