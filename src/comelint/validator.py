"""Commit message validator — runs rules in order, stops at the first rejection."""

from __future__ import annotations

from typing import Optional

from comelint.config.schema import ValidationConfig
from comelint.results.models import ACCEPTED, ValidationOutcome
from comelint.rules.registry import RuleRegistry, build_registry

_DEFAULT_REGISTRY: Optional[RuleRegistry] = None


def _default_registry() -> RuleRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = build_registry()
    return _DEFAULT_REGISTRY


def validate(
    message: str,
    config: Optional[ValidationConfig] = None,
    registry: Optional[RuleRegistry] = None,
) -> ValidationOutcome:
    """Validate *message* against *config*. Returns ``ACCEPTED`` or the first rejection.

    Never raises for a bad message or a bad pattern; both come back as a
    rejection. Use ``outcome.is_configuration_error`` to tell them apart.
    """
    config = config or ValidationConfig()
    registry = registry or _default_registry()

    for rule in registry.enabled_rules(config):
        rejection = rule.check(message, config)
        if rejection is not None:
            return ValidationOutcome(rejection)
    return ACCEPTED
