"""Rule engine — models, registry, built-in rules."""

from comelint.rules.models import Rule
from comelint.rules.registry import RuleRegistry, build_registry

__all__ = ["Rule", "RuleRegistry", "build_registry"]
