"""Helper functions kept out of the config modules."""

from .durations import parse_duration
from .validation import validate_env

__all__ = ["parse_duration", "validate_env"]
