"""Runtime dependency container.

All long-lived runtime services are assembled at startup and passed explicitly
through request handlers. Nothing in the relay reaches for a module-level
registry, so tests can build an isolated container per case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from belongings_hub.handlers.connections import ConnectionRegistry
    from belongings_hub.services.chat import ChatService
    from belongings_hub.services.badges import BadgeService
    from belongings_hub.services.gamification import GamificationService
    from belongings_hub.stores.activity import ActivityStore


@dataclass(slots=True)
class RuntimeDeps:
    """Process-wide runtime services initialized during startup."""

    registry: ConnectionRegistry
    chat_service: ChatService
    badge_service: BadgeService
    gamification_service: GamificationService
    activity: ActivityStore

    def connection_count(self) -> int:
        return self.registry.connection_count()


__all__ = ["RuntimeDeps"]
