"""Per-user activity counters (items, service records, reviews)."""

from __future__ import annotations

from collections import Counter

from ..config.badges import ACTIVITY_KINDS
from ..errors import ValidationError


def _check_kind(kind: str) -> None:
    if kind not in ACTIVITY_KINDS:
        raise ValidationError("invalid_activity_kind", f"unknown activity kind '{kind}'")


class ActivityStore:
    """Counts the catalogue activity that badges and scores are derived from."""

    def __init__(self) -> None:
        self._counts: Counter[tuple[str, str]] = Counter()

    async def record(self, user_id: str, kind: str, count: int = 1) -> int:
        _check_kind(kind)
        self._counts[(user_id, kind)] += count
        return self._counts[(user_id, kind)]

    async def count(self, user_id: str, kind: str) -> int:
        _check_kind(kind)
        return self._counts[(user_id, kind)]


__all__ = ["ActivityStore"]
