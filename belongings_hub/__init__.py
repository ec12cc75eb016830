"""Belongings Hub real-time relay package.

This package serves the real-time side of the belongings hub backend:

- WebSocket chat relay between owners and technicians
- badge_earned pushes when the badge service awards a badge
- Chat history, badge and gamification reads over REST

Architecture Overview:
    - server.py: FastAPI application entry point
    - config/: Configuration modules (environment-based)
    - handlers/: Connection registry, WebSocket relay, push adapters
    - security/: JWT issuance and verification
    - services/: Chat, badge and gamification logic
    - stores/: In-process stores standing in for the database
    - models/: Domain records and their JSON shapes
    - api/: Authenticated REST routers
    - runtime/: Startup wiring of registry, stores and services
    - telemetry/: Sentry and OpenTelemetry metrics
    - helpers/: Shared utility functions

Example:
    Start the server with uvicorn:

    $ uvicorn belongings_hub.server:app --host 0.0.0.0 --port 3000

Environment Variables:
    Required in production:
        - JWT_SECRET: HMAC key shared with the auth service

    Optional:
        - JWT_ALGORITHM: HS256, HS384 or HS512 (default: HS256)
        - JWT_EXPIRES_IN: lifetime of minted tokens (default: 1d)
        - APP_ENV, HOST, PORT: deployment settings (default port 3000)
        - APP_LOG_LEVEL: logging level (default: INFO)
        - SENTRY_DSN: enables Sentry error reporting
        - OTEL_EXPORTER_ENDPOINT: enables OTLP metrics export
"""
