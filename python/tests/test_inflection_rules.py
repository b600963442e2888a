"""
Tests for the building blocks of the inflection engine: case restoration,
rule tables, and template substitution.
"""

import dataclasses
import re

import pytest

from numerus.inflection import (
    PLURAL_RULES,
    SINGULAR_RULES,
    UNCOUNTABLE_WORDS,
    Rule,
    build_rule_table,
    interpolate,
    replace,
    restore_case,
    sanitize_rule,
)
from numerus.inflection.rules import find_rule


class TestRestoreCase:
    """Test restore_case precedence."""

    def test_identical_text_is_returned_as_is(self):
        assert restore_case("NeSE", "NeSE") == "NeSE"

    def test_lowercase_word(self):
        assert restore_case("user", "USERS") == "users"

    def test_uppercase_word(self):
        assert restore_case("USER", "users") == "USERS"

    def test_title_case_word(self):
        assert restore_case("Person", "PEOPLE") == "People"

    def test_other_mixed_case_lowercases(self):
        assert restore_case("iPhone", "IPHONES") == "iphones"

    def test_empty_word_lowercases(self):
        assert restore_case("", "S") == "s"

    def test_single_character_word(self):
        assert restore_case("R", "s") == "S"
        assert restore_case("r", "S") == "s"

    def test_non_letter_first_character(self):
        """Digits are their own uppercase, so "1Abc" reads as title case."""
        assert restore_case("1Abc", "xYZ") == "Xyz"


class TestSanitizeRule:
    """Test rule pattern compilation."""

    def test_string_rule_matches_whole_word_only(self):
        pattern = sanitize_rule("thou")

        assert pattern.search("thou")
        assert pattern.search("THOU")
        assert pattern.search("thousand") is None
        assert pattern.search("methou") is None

    def test_compiled_rule_passes_through(self):
        compiled = re.compile(r"s$", re.IGNORECASE)
        assert sanitize_rule(compiled) is compiled


class TestBuildRuleTable:
    """Test rule table assembly."""

    def test_default_table_sizes(self):
        patterns = [u for u in UNCOUNTABLE_WORDS if not isinstance(u, str)]
        literals = [u for u in UNCOUNTABLE_WORDS if isinstance(u, str)]

        table = build_rule_table(PLURAL_RULES, SINGULAR_RULES, UNCOUNTABLE_WORDS)

        assert len(table.plural) == len(PLURAL_RULES) + len(patterns)
        assert len(table.singular) == len(SINGULAR_RULES) + len(patterns)
        assert table.uncountables == frozenset(literals)

    def test_uncountable_patterns_become_trailing_identity_rules(self):
        sheep = re.compile(r"sheep$", re.IGNORECASE)
        table = build_rule_table([(r"x", "y")], [(r"y", "x")], ["Rice", sheep])

        assert table.plural[-1] == Rule(sheep, "$0")
        assert table.singular[-1] == Rule(sheep, "$0")
        assert table.uncountables == frozenset({"rice"})

    def test_overrides_go_after_uncountable_patterns(self):
        sheep = re.compile(r"sheep$", re.IGNORECASE)
        table = build_rule_table([], [], [sheep], plural_overrides=[("sheep", "sheeps")])

        assert table.plural[0].replacement == "$0"
        assert table.plural[-1].replacement == "sheeps"
        assert len(table.singular) == 1

    def test_table_is_frozen(self):
        table = build_rule_table(PLURAL_RULES, SINGULAR_RULES)

        assert isinstance(table.plural, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.plural = ()


class TestFindRule:
    """Rules are scanned last-registered first."""

    def test_last_matching_rule_wins(self):
        table = build_rule_table([(re.compile(r"s?$"), "s"), ("user", "people")], [])

        assert find_rule(table.plural, "user").replacement == "people"
        assert find_rule(table.plural, "admin").replacement == "s"

    def test_no_match_returns_none(self):
        table = build_rule_table([("thou", "you")], [])
        assert find_rule(table.plural, "user") is None


class TestInterpolate:
    """Test $N back-reference expansion."""

    def test_whole_match_and_groups(self):
        match = re.compile(r"(x|ch)(es)$").search("boxes")

        assert interpolate("$0", match) == "xes"
        assert interpolate("$1", match) == "x"
        assert interpolate("$1-$2", match) == "x-es"

    def test_non_participating_group_is_empty(self):
        match = re.compile(r"(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$").search("wolf")
        assert interpolate("$1$2ves", match) == "lves"

    def test_missing_group_is_empty(self):
        match = re.compile(r"(a)").search("cat")
        assert interpolate("[$9]", match) == "[]"
        assert interpolate("[$12]", match) == "[]"

    def test_template_without_references(self):
        match = re.compile(r"men$").search("women")
        assert interpolate("man", match) == "man"


class TestReplace:
    """Test rule application and case restoration of the replaced text."""

    def test_replacement_takes_match_casing(self):
        rule = Rule(re.compile(r"(x|ch|ss|sh|zz)$", re.IGNORECASE), "$1es")

        assert replace("box", rule) == "boxes"
        assert replace("Box", rule) == "Boxes"
        assert replace("BOX", rule) == "BOXES"

    def test_only_first_match_is_replaced(self):
        rule = Rule(re.compile(r"a", re.IGNORECASE), "o")
        assert replace("banana", rule) == "bonana"

    def test_zero_width_match_uses_preceding_character(self):
        rule = Rule(re.compile(r"s?$", re.IGNORECASE), "s")

        assert replace("user", rule) == "users"
        assert replace("USER", rule) == "USERS"
        assert replace("useR", rule) == "useRS"

    def test_zero_width_match_at_start_lowercases(self):
        rule = Rule(re.compile(r"^"), "X")
        assert replace("Abc", rule) == "xAbc"

    def test_identity_rule_keeps_word(self):
        rule = Rule(re.compile(r"[^aeiou]ese$", re.IGNORECASE), "$0")
        assert replace("Japanese", rule) == "Japanese"
        assert replace("CHINESE", rule) == "CHINESE"
