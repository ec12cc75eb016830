"""In-process stores standing in for the document database.

Each store exposes coroutine methods so callers await them exactly as they
would a real database driver; all state lives in memory and is lost on restart.
"""

from .messages import MessageStore
from .badges import BadgeStore
from .activity import ActivityStore
from .gamification import GamificationStore

__all__ = [
    "MessageStore",
    "BadgeStore",
    "ActivityStore",
    "GamificationStore",
]
