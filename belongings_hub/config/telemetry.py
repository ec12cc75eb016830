"""Telemetry configuration: env vars, metric specs, Sentry constants."""

import os

# ---------------------------------------------------------------------------
# Sentry
# ---------------------------------------------------------------------------
SENTRY_DSN: str = os.getenv("SENTRY_DSN", "")
SENTRY_ENVIRONMENT: str = os.getenv("SENTRY_ENVIRONMENT", "production")
SENTRY_RELEASE: str = os.getenv("SENTRY_RELEASE", "")
SENTRY_SAMPLE_RATE: float = float(os.getenv("SENTRY_SAMPLE_RATE", "1.0"))

# ---------------------------------------------------------------------------
# OTel
# ---------------------------------------------------------------------------
OTEL_SERVICE_NAME: str = os.getenv("OTEL_SERVICE_NAME", "belongings-hub-relay")
OTEL_EXPORTER_ENDPOINT: str = os.getenv("OTEL_EXPORTER_ENDPOINT", "")
OTEL_EXPORTER_TOKEN: str = os.getenv("OTEL_EXPORTER_TOKEN", "")
OTEL_METRICS_EXPORT_INTERVAL_MS: int = int(os.getenv("OTEL_METRICS_EXPORT_INTERVAL_MS", "15000"))
OTEL_ENVIRONMENT: str = os.getenv("OTEL_ENVIRONMENT", "production")

# ---------------------------------------------------------------------------
# Metric spec tuples: (name, unit, description)
# ---------------------------------------------------------------------------

# Counters
METRIC_CONNECTIONS_ACCEPTED_TOTAL = (
    "belongings_hub.connections_accepted_total",
    "{connection}",
    "Authenticated WebSocket connections",
)
METRIC_CONNECTIONS_REJECTED_TOTAL = (
    "belongings_hub.connections_rejected_total",
    "{connection}",
    "Handshakes refused (missing or invalid token)",
)
METRIC_MESSAGES_PERSISTED_TOTAL = (
    "belongings_hub.messages_persisted_total",
    "{message}",
    "Chat messages saved from the socket",
)
METRIC_MESSAGES_RELAYED_TOTAL = (
    "belongings_hub.messages_relayed_total",
    "{message}",
    "Chat messages forwarded to a connected recipient",
)
METRIC_MESSAGES_DROPPED_TOTAL = (
    "belongings_hub.messages_dropped_total",
    "{message}",
    "Frames dropped (malformed, invalid or recipient offline)",
)
METRIC_BADGE_PUSHES_TOTAL = (
    "belongings_hub.badge_pushes_total",
    "{event}",
    "badge_earned frames sent",
)
METRIC_ERRORS_TOTAL = ("belongings_hub.errors_total", "{error}", "Unhandled errors")

# UpDown counters
METRIC_ACTIVE_CONNECTIONS = (
    "belongings_hub.active_connections",
    "{connection}",
    "Current registered WebSocket connections",
)

# ---------------------------------------------------------------------------
# Sentry constants
# ---------------------------------------------------------------------------
SENTRY_RATE_LIMIT_S: float = 10.0
SENTRY_TAG_USER_ID = "user_id"
SENTRY_TAG_CONNECTION_ID = "connection_id"


__all__ = [
    # Sentry env
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
    "SENTRY_RELEASE",
    "SENTRY_SAMPLE_RATE",
    # OTel env
    "OTEL_SERVICE_NAME",
    "OTEL_EXPORTER_ENDPOINT",
    "OTEL_EXPORTER_TOKEN",
    "OTEL_METRICS_EXPORT_INTERVAL_MS",
    "OTEL_ENVIRONMENT",
    # Counters
    "METRIC_CONNECTIONS_ACCEPTED_TOTAL",
    "METRIC_CONNECTIONS_REJECTED_TOTAL",
    "METRIC_MESSAGES_PERSISTED_TOTAL",
    "METRIC_MESSAGES_RELAYED_TOTAL",
    "METRIC_MESSAGES_DROPPED_TOTAL",
    "METRIC_BADGE_PUSHES_TOTAL",
    "METRIC_ERRORS_TOTAL",
    # UpDown counters
    "METRIC_ACTIVE_CONNECTIONS",
    # Sentry constants
    "SENTRY_RATE_LIMIT_S",
    "SENTRY_TAG_USER_ID",
    "SENTRY_TAG_CONNECTION_ID",
]
