"""Domain records shared by the stores, services and wire serializers."""

from .chat import ChatMessage, Conversation
from .badges import Badge, UserBadge
from .gamification import GamificationProfile

__all__ = [
    "ChatMessage",
    "Conversation",
    "Badge",
    "UserBadge",
    "GamificationProfile",
]
