"""Timestamp helpers for record fields."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: datetime) -> str:
    """Render a UTC timestamp the way the mobile client parses it."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


__all__ = ["utc_now", "isoformat"]
