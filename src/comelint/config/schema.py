"""Lint settings: the rule switches and length/pattern parameters, plus output format."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")

UNLIMITED_LENGTH = sys.maxsize


@dataclass(frozen=True)
class ValidationConfig:
    """Which rules are switched on, and their parameters.

    ``min_length <= max_length`` is not checked here; a config where it does
    not hold simply rejects every message on one of the length rules.
    """

    prohibit_merge: bool = False
    prohibit_revert: bool = False
    prohibit_wip: bool = False
    prohibit_multiline: bool = False
    min_length: int = 1
    max_length: int = UNLIMITED_LENGTH
    pattern: str = ".*"  # case-insensitive, compiled at validation time


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class ComelintConfig:
    version: str = "1.0"
    rules: ValidationConfig = field(default_factory=ValidationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
