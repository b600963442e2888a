"""
Rule table construction.

A rule table holds two independent rule sequences (plural and singular
direction). Each sequence is scanned from the last rule back to the first,
so rules appended later override the general ones before them.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Union

RulePattern = Union[str, re.Pattern]


@dataclass(frozen=True)
class Rule:
    """A compiled matcher and its replacement template."""

    pattern: re.Pattern
    replacement: str


@dataclass(frozen=True)
class RuleTable:
    """
    Immutable plural/singular rule sequences plus the literal uncountables.

    Built once by build_rule_table(); never mutated afterwards, so one table
    can be shared by any number of threads.
    """

    plural: tuple[Rule, ...]
    singular: tuple[Rule, ...]
    uncountables: frozenset[str]


def sanitize_rule(rule: RulePattern) -> re.Pattern:
    """
    Turn a rule pattern into a compiled regex.

    Plain strings are literal words: they are anchored so only the whole word
    matches, and matched case-insensitively. Compiled patterns pass through.
    """
    if isinstance(rule, str):
        return re.compile("^" + rule + "$", re.IGNORECASE)
    return rule


def build_rule_table(
    plural_rules: Iterable[tuple[RulePattern, str]],
    singular_rules: Iterable[tuple[RulePattern, str]],
    uncountables: Iterable[RulePattern] = (),
    plural_overrides: Iterable[tuple[RulePattern, str]] = (),
    singular_overrides: Iterable[tuple[RulePattern, str]] = (),
) -> RuleTable:
    """
    Assemble a RuleTable from literal rule data.

    Literal uncountable words go into an exact-match set. Uncountable patterns
    become identity ("$0") rules appended after the given rules of BOTH
    directions, so they are tried before any general rule. Overrides go last
    of all and beat both.

    Args:
        plural_rules: (pattern, replacement) pairs in registration order
        singular_rules: (pattern, replacement) pairs in registration order
        uncountables: Literal words or compiled patterns
        plural_overrides: Domain-specific plural rules, highest priority
        singular_overrides: Domain-specific singular rules, highest priority

    Returns:
        Frozen RuleTable
    """
    plural = [Rule(sanitize_rule(p), r) for p, r in plural_rules]
    singular = [Rule(sanitize_rule(p), r) for p, r in singular_rules]
    words = set()

    for entry in uncountables:
        if isinstance(entry, str):
            words.add(entry.lower())
            continue
        identity = Rule(sanitize_rule(entry), "$0")
        plural.append(identity)
        singular.append(identity)

    plural.extend(Rule(sanitize_rule(p), r) for p, r in plural_overrides)
    singular.extend(Rule(sanitize_rule(p), r) for p, r in singular_overrides)

    return RuleTable(
        plural=tuple(plural),
        singular=tuple(singular),
        uncountables=frozenset(words),
    )


def find_rule(rules: tuple[Rule, ...], word: str) -> Rule | None:
    """Return the last-registered rule that matches ``word``, if any."""
    for rule in reversed(rules):
        if rule.pattern.search(word):
            return rule
    return None
