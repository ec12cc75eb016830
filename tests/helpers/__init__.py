"""Shared utilities for unit tests and test clients."""

__all__ = [
    "fakes",
    "websocket",
]
