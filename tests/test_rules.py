"""Tests for rule models, registry, and built-in rules."""

import pytest

from comelint.config.schema import ValidationConfig
from comelint.results.models import Rejection
from comelint.rules.builtin import ALL_BUILTIN_RULES
from comelint.rules.builtin.multiline import is_multiline
from comelint.rules.models import Rule
from comelint.rules.registry import RuleRegistry, build_registry
from comelint.validator import validate


def _never(message, config):
    return None


class TestRuleModel:
    def test_always_on_without_toggle(self):
        rule = Rule(id="R1", name="R1", description="", check=_never)
        assert rule.is_enabled(ValidationConfig()) is True

    def test_toggle_reads_config(self):
        rule = Rule(id="R1", name="R1", description="", check=_never, toggle="prohibit_wip")
        assert rule.is_enabled(ValidationConfig()) is False
        assert rule.is_enabled(ValidationConfig(prohibit_wip=True)) is True


class TestRuleRegistry:
    def test_register_and_query(self):
        reg = RuleRegistry()
        rule = Rule(id="R1", name="R1", description="", check=_never)
        reg.register(rule)
        assert reg.get("R1") is rule
        assert reg.get("missing") is None
        assert len(reg.all_rules) == 1

    def test_duplicate_id_rejected(self):
        reg = RuleRegistry()
        reg.register(Rule(id="R1", name="R1", description="", check=_never))
        with pytest.raises(ValueError):
            reg.register(Rule(id="R1", name="Other", description="", check=_never))

    def test_enabled_rules_keep_order(self):
        reg = build_registry()
        ids = [r.id for r in reg.enabled_rules(ValidationConfig(prohibit_revert=True))]
        assert ids == ["missing-message", "min-length", "max-length", "no-revert", "regexp"]

    def test_custom_registry_used_by_validator(self):
        always = Rejection("always", "always", "Always rejected")
        reg = RuleRegistry()
        reg.register(Rule(id="always", name="Always", description="", check=lambda m, c: always))
        outcome = validate("anything", ValidationConfig(), registry=reg)
        assert outcome.rejection is always


class TestBuiltinRules:
    def test_evaluation_order(self):
        assert [r.id for r in ALL_BUILTIN_RULES] == [
            "missing-message",
            "min-length",
            "max-length",
            "no-multiline",
            "no-merge",
            "no-revert",
            "no-wip",
            "regexp",
        ]

    def test_unique_ids(self):
        ids = [r.id for r in ALL_BUILTIN_RULES]
        assert len(ids) == len(set(ids))

    def test_toggles_exist_on_config(self):
        cfg = ValidationConfig()
        for rule in ALL_BUILTIN_RULES:
            if rule.toggle is not None:
                assert isinstance(getattr(cfg, rule.toggle), bool)

    def test_rejections_name_their_rule(self):
        cfg = ValidationConfig(
            prohibit_merge=True, prohibit_revert=True, prohibit_wip=True,
            prohibit_multiline=True, min_length=2, max_length=8, pattern="^z",
        )
        cases = {
            "": "missing-message",
            "a": "min-length",
            "a" * 9: "max-length",
            "a\nb": "no-multiline",
            "merge": "no-merge",
            "revert": "no-revert",
            "wip": "no-wip",
            "fix": "regexp",
        }
        for message, rule_id in cases.items():
            assert validate(message, cfg).rejection.rule_id == rule_id


class TestIsMultiline:
    @pytest.mark.parametrize("text,expected", [
        ("one line", False),
        ("one line\n", False),
        ("one\ntwo", True),
        ("one\n\n", True),
        ("\n", False),
        ("one\r\n", False),
    ])
    def test_cases(self, text, expected):
        assert is_multiline(text) is expected
