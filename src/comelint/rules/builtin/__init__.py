"""Built-in rules, in evaluation order."""

from comelint.rules.builtin.length import ALL_LENGTH_RULES
from comelint.rules.builtin.multiline import ALL_MULTILINE_RULES
from comelint.rules.builtin.pattern import ALL_PATTERN_RULES
from comelint.rules.builtin.prefixes import ALL_PREFIX_RULES

ALL_BUILTIN_RULES = [
    *ALL_LENGTH_RULES,
    *ALL_MULTILINE_RULES,
    *ALL_PREFIX_RULES,
    *ALL_PATTERN_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
