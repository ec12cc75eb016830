"""Unit tests for duration parsing and environment validation."""

from __future__ import annotations

import logging

import pytest

import belongings_hub.helpers.validation as validation_mod
from belongings_hub.helpers import parse_duration, validate_env


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("45s", 45),
        ("30m", 1800),
        ("12h", 43200),
        ("1d", 86400),
        ("2w", 1209600),
        ("90", 90),
        (15, 15),
        (" 1D ", 86400),
    ],
)
def test_parse_duration(value, expected: int) -> None:
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "soon", "1y", "-5s", -1])
def test_parse_duration_rejects(value) -> None:
    with pytest.raises(ValueError):
        parse_duration(value)


def test_validate_env_rejects_unknown_algorithm(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(validation_mod, "JWT_ALGORITHM", "RS256")
    with pytest.raises(ValueError, match="JWT_ALGORITHM"):
        validate_env()


def test_validate_env_rejects_bad_expiry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(validation_mod, "JWT_EXPIRES_IN", "forever")
    with pytest.raises(ValueError, match="JWT_EXPIRES_IN"):
        validate_env()


def test_validate_env_warns_on_dev_secret_in_production(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr(validation_mod, "APP_ENV", "production")
    monkeypatch.setattr(validation_mod, "JWT_SECRET", validation_mod.JWT_DEV_SECRET)
    with caplog.at_level(logging.WARNING, logger=validation_mod.__name__):
        validate_env()
    assert "JWT_SECRET" in caplog.text
