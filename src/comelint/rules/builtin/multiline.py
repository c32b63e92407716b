"""Multiline message rule."""

from __future__ import annotations

from typing import Optional

from comelint.config.schema import ValidationConfig
from comelint.results.models import Rejection
from comelint.rules.models import Rule

_MULTILINE = Rejection("no-multiline", "multiline prohibited", "Multiline commits are prohibited")


def is_multiline(message: str) -> bool:
    """True if *message* has more than one line, ignoring one trailing newline."""
    if message.endswith("\n"):
        message = message[:-1]
    return "\n" in message


def _check_multiline(message: str, config: ValidationConfig) -> Optional[Rejection]:
    return _MULTILINE if is_multiline(message) else None


NO_MULTILINE = Rule(
    id="no-multiline",
    name="No Multiline",
    description="Rejects messages spanning more than one line.",
    check=_check_multiline,
    toggle="prohibit_multiline",
)

ALL_MULTILINE_RULES = [NO_MULTILINE]
