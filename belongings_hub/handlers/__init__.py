"""Connection-level handlers: registry, WebSocket relay and push adapters."""
