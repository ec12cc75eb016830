"""Main FastAPI server for the belongings hub relay.

Provides:

- REST endpoints for health checks (/healthz, /)
- WebSocket endpoint for real-time chat (/ and /ws, token in the query string)
- Authenticated REST reads for chat history, badges and gamification

Server Lifecycle:
    1. On startup: validate configuration, start telemetry, build runtime deps
    2. Accept WebSocket connections and relay chat_message frames
    3. Push badge_earned events when the badge service awards a badge
    4. On shutdown: flush telemetry

Example:
    Run directly with uvicorn:
        $ uvicorn belongings_hub.server:app --host 0.0.0.0 --port 3000

    Or through the console script:
        $ belongings-hub
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from .api import api_router
from .config import APP_ENV, HOST, PORT, WS_PATH
from .logging import configure_logging
from .helpers.validation import validate_env
from .handlers.websocket import handle_websocket_connection
from .runtime import RuntimeDeps, build_runtime_deps
from .telemetry import init_telemetry, shutdown_telemetry

logger = logging.getLogger(__name__)

configure_logging()


def create_app(runtime_deps: RuntimeDeps | None = None) -> FastAPI:
    """Build the application; tests pass their own ``runtime_deps``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        validate_env()
        init_telemetry()
        app.state.runtime_deps = runtime_deps or build_runtime_deps()
        logger.info("relay ready env=%s", APP_ENV)
        try:
            yield
        finally:
            shutdown_telemetry()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)

    @app.get("/")
    async def root():
        """Root endpoint for load balancer health checks."""
        return {"status": "ok", "connections": app.state.runtime_deps.connection_count()}

    @app.get("/healthz")
    async def healthz():
        """Health check endpoint (no authentication required)."""
        return {"status": "ok", "connections": app.state.runtime_deps.connection_count()}

    @app.get("/favicon.ico", status_code=204)
    async def favicon():
        """Suppress favicon requests from browsers/probes."""
        return None

    @app.websocket("/")
    async def websocket_root(websocket: WebSocket):
        """WebSocket upgrade on the bare host, as mobile clients connect."""
        await handle_websocket_connection(websocket, websocket.app.state.runtime_deps)

    @app.websocket(WS_PATH)
    async def websocket_endpoint(websocket: WebSocket):
        await handle_websocket_connection(websocket, websocket.app.state.runtime_deps)

    app.include_router(api_router)
    return app


app = create_app()


def main() -> None:
    import uvicorn  # noqa: PLC0415

    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
