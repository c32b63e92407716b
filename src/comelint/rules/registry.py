"""Rule registry — holds the built-in rules in evaluation order."""

from __future__ import annotations

from typing import Dict, List, Optional

from comelint.config.schema import ValidationConfig
from comelint.rules.models import Rule


class RuleRegistry:
    """Ordered store of rules; iteration order is evaluation order."""

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        if rule.id in self._rules:
            raise ValueError(f"Rule already registered: {rule.id}")
        self._rules[rule.id] = rule

    def register_many(self, rules: List[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def enabled_rules(self, config: ValidationConfig) -> List[Rule]:
        return [r for r in self._rules.values() if r.is_enabled(config)]


def build_registry() -> RuleRegistry:
    """Create a registry populated with the built-in rules."""
    from comelint.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)
    return registry
