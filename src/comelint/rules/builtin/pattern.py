"""Custom regular expression rule."""

from __future__ import annotations

import re
from typing import Optional

from comelint.config.schema import ValidationConfig
from comelint.results.models import Rejection, RejectionKind
from comelint.rules.models import Rule

_INVALID = Rejection(
    "regexp",
    "invalid pattern",
    "Regexp rule is invalid",
    kind=RejectionKind.CONFIGURATION_ERROR,
)
_MISMATCH = Rejection("regexp", "pattern mismatch", "Message does not pass RegExp matching")


def _check_pattern(message: str, config: ValidationConfig) -> Optional[Rejection]:
    try:
        compiled = re.compile(config.pattern, re.IGNORECASE)
    except re.error:
        return _INVALID
    return None if compiled.search(message) else _MISMATCH


REGEXP = Rule(
    id="regexp",
    name="RegExp",
    description="Rejects messages not matching the configured pattern (case-insensitive, unanchored).",
    check=_check_pattern,
)

ALL_PATTERN_RULES = [REGEXP]
