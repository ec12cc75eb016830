"""Domain services consumed by the relay and the REST routes."""

from .push import PushNotifier, LoggingPushNotifier
from .chat import ChatService
from .badges import BadgeService
from .gamification import GamificationService

__all__ = [
    "PushNotifier",
    "LoggingPushNotifier",
    "ChatService",
    "BadgeService",
    "GamificationService",
]
