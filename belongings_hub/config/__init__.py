"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- deploy: environment name and bind address
- secrets: JWT signing settings
- websocket: handshake parameters, close codes, frame types
- chat: participant kinds and push title
- badges: badge catalogue, triggers and score weights

Logging and telemetry values are imported from their own modules.
Functions live in belongings_hub/helpers/.
"""

from .deploy import APP_ENV, HOST, PORT
from .secrets import (
    JWT_DEV_SECRET,
    JWT_SECRET,
    JWT_ALGORITHM,
    JWT_EXPIRES_IN,
    SUPPORTED_JWT_ALGORITHMS,
)
from .websocket import (
    WS_PATH,
    WS_TOKEN_QUERY_PARAM,
    WS_CLOSE_POLICY_VIOLATION_CODE,
    WS_CLOSE_NORMAL_CODE,
    WS_CLOSE_TOKEN_REQUIRED_REASON,
    WS_CLOSE_INVALID_TOKEN_REASON,
)
from .chat import (
    PARTICIPANT_USER,
    PARTICIPANT_TECHNICIAN,
    PARTICIPANT_KINDS,
    DEFAULT_PARTICIPANT_KIND,
    CHAT_PUSH_TITLE,
)
from .badges import (
    ACTIVITY_KINDS,
    BADGE_CATALOGUE,
    BADGE_TRIGGERS,
    SCORE_WEIGHTS,
)

__all__ = [
    "APP_ENV",
    "HOST",
    "PORT",
    "JWT_DEV_SECRET",
    "JWT_SECRET",
    "JWT_ALGORITHM",
    "JWT_EXPIRES_IN",
    "SUPPORTED_JWT_ALGORITHMS",
    "WS_PATH",
    "WS_TOKEN_QUERY_PARAM",
    "WS_CLOSE_POLICY_VIOLATION_CODE",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_TOKEN_REQUIRED_REASON",
    "WS_CLOSE_INVALID_TOKEN_REASON",
    "PARTICIPANT_USER",
    "PARTICIPANT_TECHNICIAN",
    "PARTICIPANT_KINDS",
    "DEFAULT_PARTICIPANT_KIND",
    "CHAT_PUSH_TITLE",
    "ACTIVITY_KINDS",
    "BADGE_CATALOGUE",
    "BADGE_TRIGGERS",
    "SCORE_WEIGHTS",
]
