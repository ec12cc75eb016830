"""Unit tests for the gamification profile and good-owner score."""

from __future__ import annotations

import asyncio

import pytest

from belongings_hub.errors import ValidationError
from belongings_hub.services import GamificationService
from belongings_hub.stores import ActivityStore, GamificationStore


def _service() -> tuple[GamificationService, ActivityStore]:
    activity = ActivityStore()
    return GamificationService(GamificationStore(), activity), activity


def test_first_read_creates_default_profile() -> None:
    service, _ = _service()
    profile = asyncio.run(service.get_gamification_data("u1"))
    assert profile.to_dict() == {"user": "u1", "xp": 0, "level": 1, "goodOwnerScore": 0}


def test_good_owner_score_weights_activity() -> None:
    service, activity = _service()

    async def _run():
        await activity.record("u1", "item", count=3)
        await activity.record("u1", "service_history", count=2)
        await activity.record("u1", "review")
        score = await service.calculate_good_owner_score("u1")
        profile = await service.get_gamification_data("u1")
        return score, profile

    score, profile = asyncio.run(_run())
    assert score == 3 * 10 + 2 * 20 + 5
    assert profile.good_owner_score == score


def test_score_is_per_user() -> None:
    service, activity = _service()

    async def _run():
        await activity.record("u2", "item", count=10)
        return await service.calculate_good_owner_score("u1")

    assert asyncio.run(_run()) == 0


def test_activity_rejects_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        asyncio.run(ActivityStore().record("u1", "pet"))
