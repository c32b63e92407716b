"""Presence and length rules."""

from __future__ import annotations

from typing import Optional

from comelint.config.schema import ValidationConfig
from comelint.results.models import Rejection
from comelint.rules.models import Rule

_MISSING = Rejection("missing-message", "missing message", "Please pass commit message")
_TOO_SHORT = Rejection("min-length", "too short", "Message length is less than recommended")
_TOO_LONG = Rejection("max-length", "too long", "Message length is longer than recommended")


def _check_missing(message: str, config: ValidationConfig) -> Optional[Rejection]:
    return _MISSING if len(message) == 0 else None


def _check_min_length(message: str, config: ValidationConfig) -> Optional[Rejection]:
    return _TOO_SHORT if len(message) < config.min_length else None


def _check_max_length(message: str, config: ValidationConfig) -> Optional[Rejection]:
    return _TOO_LONG if len(message) > config.max_length else None


MISSING_MESSAGE = Rule(
    id="missing-message",
    name="Missing Message",
    description="Rejects an empty commit message.",
    check=_check_missing,
)

MIN_LENGTH = Rule(
    id="min-length",
    name="Minimum Length",
    description="Rejects messages shorter than min_length characters.",
    check=_check_min_length,
)

MAX_LENGTH = Rule(
    id="max-length",
    name="Maximum Length",
    description="Rejects messages longer than max_length characters.",
    check=_check_max_length,
)

ALL_LENGTH_RULES = [MISSING_MESSAGE, MIN_LENGTH, MAX_LENGTH]
