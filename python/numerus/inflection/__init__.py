"""
English noun inflection.

Converts words between singular and plural form, checks grammatical number,
and derives the naive-but-safe plural used for model/table naming.
"""

from .casing import restore_case
from .core import (
    Inflector,
    get_inflector,
    is_plural,
    is_singular,
    plural,
    safe_plural,
    singular,
)
from .rules import Rule, RuleTable, build_rule_table, sanitize_rule
from .substitution import interpolate, replace
from .constants import (
    IRREGULAR_PAIRS,
    PLURAL_RULES,
    SINGULAR_RULES,
    UNCOUNTABLE_WORDS,
)

__all__ = [
    "Inflector",
    "get_inflector",
    "plural",
    "singular",
    "is_plural",
    "is_singular",
    "safe_plural",
    "restore_case",
    "interpolate",
    "replace",
    "Rule",
    "RuleTable",
    "build_rule_table",
    "sanitize_rule",
    "IRREGULAR_PAIRS",
    "PLURAL_RULES",
    "SINGULAR_RULES",
    "UNCOUNTABLE_WORDS",
]
