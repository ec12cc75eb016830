"""Parsing for short duration strings such as ``1d`` or ``30m``."""

from __future__ import annotations

import re

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)

_UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 604800,
}


def parse_duration(value: str | int) -> int:
    """Return the number of seconds described by ``value``.

    Bare integers are seconds. Raises ValueError for anything else that does
    not match ``<number><unit>`` with unit one of s, m, h, d, w.
    """
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"duration must be non-negative, got {value}")
        return value
    match = _DURATION_RE.match(value or "")
    if not match:
        raise ValueError(f"invalid duration {value!r}; expected e.g. '45s', '30m', '12h', '1d'")
    amount, unit = match.groups()
    return int(amount) * _UNIT_SECONDS[unit.lower()]


__all__ = ["parse_duration"]
