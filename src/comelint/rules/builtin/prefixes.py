"""Merge / revert / WIP prefix rules."""

from __future__ import annotations

import re
from typing import Optional

from comelint.config.schema import ValidationConfig
from comelint.results.models import Rejection
from comelint.rules.models import CheckFn, Rule


def _prefix_check(pattern: str, rejection: Rejection) -> CheckFn:
    compiled = re.compile(pattern, re.IGNORECASE)

    def check(message: str, config: ValidationConfig) -> Optional[Rejection]:
        # re.match anchors at the start of the whole message, not each line
        return rejection if compiled.match(message) else None

    return check


NO_MERGE = Rule(
    id="no-merge",
    name="No Merge",
    description="Rejects messages starting with 'merge' (any case).",
    check=_prefix_check(
        r"merge.*",
        Rejection("no-merge", "merge prohibited", "Merge commits are prohibited"),
    ),
    toggle="prohibit_merge",
)

NO_REVERT = Rule(
    id="no-revert",
    name="No Revert",
    description="Rejects messages starting with 'revert' (any case).",
    check=_prefix_check(
        r"revert.*",
        Rejection("no-revert", "revert prohibited", "Revert commits are prohibited"),
    ),
    toggle="prohibit_revert",
)

NO_WIP = Rule(
    id="no-wip",
    name="No WIP",
    description="Rejects messages starting with 'wip' (any case).",
    check=_prefix_check(
        r"wip.*",
        Rejection("no-wip", "WIP prohibited", "WIP commits are prohibited"),
    ),
    toggle="prohibit_wip",
)

ALL_PREFIX_RULES = [NO_MERGE, NO_REVERT, NO_WIP]
