"""Rule data model — a named predicate over (message, config)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from comelint.config.schema import ValidationConfig
from comelint.results.models import Rejection

CheckFn = Callable[[str, ValidationConfig], Optional[Rejection]]


@dataclass(frozen=True)
class Rule:
    """A single commit message rule.

    ``check`` is pure: it returns a ``Rejection`` when the message breaks the
    rule and ``None`` otherwise. ``toggle`` names the ``ValidationConfig``
    flag that switches the rule on; rules without one always run.
    """

    id: str
    name: str
    description: str
    check: CheckFn
    toggle: Optional[str] = None

    def is_enabled(self, config: ValidationConfig) -> bool:
        if self.toggle is None:
            return True
        return bool(getattr(config, self.toggle))
