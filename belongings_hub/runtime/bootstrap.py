"""Runtime dependency bootstrap.

Builds the registry, stores and services once at startup. Request handlers
consume these dependencies directly instead of importing globals.
"""

from __future__ import annotations

from belongings_hub.config.badges import BADGE_CATALOGUE
from belongings_hub.handlers.connections import ConnectionRegistry
from belongings_hub.handlers.notifications import BadgePushAdapter
from belongings_hub.models.badges import Badge
from belongings_hub.services.badges import BadgeService
from belongings_hub.services.chat import ChatService
from belongings_hub.services.gamification import GamificationService
from belongings_hub.services.push import LoggingPushNotifier, PushNotifier
from belongings_hub.stores import ActivityStore, BadgeStore, GamificationStore, MessageStore

from .dependencies import RuntimeDeps


def _build_catalogue() -> list[Badge]:
    return [
        Badge(name=name, description=description, icon=icon, criteria=criteria)
        for name, description, icon, criteria in BADGE_CATALOGUE
    ]


def build_runtime_deps(
    *,
    registry: ConnectionRegistry | None = None,
    push_notifier: PushNotifier | None = None,
    message_store: MessageStore | None = None,
) -> RuntimeDeps:
    """Build runtime dependencies; overrides are for tests and tooling."""
    registry = registry or ConnectionRegistry()
    activity = ActivityStore()
    badge_push = BadgePushAdapter(registry)

    chat_service = ChatService(
        message_store or MessageStore(),
        push_notifier or LoggingPushNotifier(),
    )
    badge_service = BadgeService(BadgeStore(_build_catalogue()), activity, badge_push)
    gamification_service = GamificationService(GamificationStore(), activity)

    return RuntimeDeps(
        registry=registry,
        chat_service=chat_service,
        badge_service=badge_service,
        gamification_service=gamification_service,
        activity=activity,
    )


__all__ = ["build_runtime_deps"]
