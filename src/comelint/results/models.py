"""Validation outcome data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RejectionKind(str, Enum):
    RULE_VIOLATION = "rule_violation"  # the message broke a configured rule
    CONFIGURATION_ERROR = "configuration_error"  # the config itself is unusable


@dataclass(frozen=True)
class Rejection:
    """Why a message was turned down, as reported by a single rule."""

    rule_id: str
    reason: str  # short, stable, e.g. "too long"
    message: str  # sentence shown to the user
    kind: RejectionKind = RejectionKind.RULE_VIOLATION


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one message: accepted, or the first rejection."""

    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def reason(self) -> Optional[str]:
        return self.rejection.reason if self.rejection else None

    @property
    def is_configuration_error(self) -> bool:
        return (
            self.rejection is not None
            and self.rejection.kind is RejectionKind.CONFIGURATION_ERROR
        )


ACCEPTED = ValidationOutcome()
