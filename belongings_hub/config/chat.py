"""Chat persistence and notification settings."""

import os


# Who can take part in a conversation
PARTICIPANT_USER = "User"
PARTICIPANT_TECHNICIAN = "Technician"
PARTICIPANT_KINDS = (PARTICIPANT_USER, PARTICIPANT_TECHNICIAN)

# Frames relayed over the socket always come from app users
DEFAULT_PARTICIPANT_KIND = PARTICIPANT_USER

CHAT_PUSH_TITLE = os.getenv("CHAT_PUSH_TITLE", "New Message")


__all__ = [
    "PARTICIPANT_USER",
    "PARTICIPANT_TECHNICIAN",
    "PARTICIPANT_KINDS",
    "DEFAULT_PARTICIPANT_KIND",
    "CHAT_PUSH_TITLE",
]
