"""
Inflector: plural/singular conversion and number checks for English words.

Lookup precedence for every operation:
1. Irregular words (exact, case-insensitive)
2. Literal uncountable words
3. Rule cascade (last-registered rule first)

The replacement always takes the casing style of the input word.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from numerus.logging_config import get_logger

from .casing import restore_case
from .constants import IRREGULAR_PAIRS, PLURAL_RULES, SINGULAR_RULES, UNCOUNTABLE_WORDS
from .rules import Rule, RulePattern, build_rule_table, find_rule
from .substitution import replace

logger = get_logger(__name__)


class Inflector:
    """
    Immutable English inflection engine.

    All tables are built in __init__ and exposed read-only, so an Inflector
    can be shared across threads without locking.

    Args:
        plural_rules: Plural-direction (pattern, replacement) pairs
        singular_rules: Singular-direction (pattern, replacement) pairs
        irregulars: (singular, plural) pairs; later pairs win on conflicts
        uncountables: Literal words or compiled patterns never inflected
        plural_overrides: Extra plural rules tried before everything else
        singular_overrides: Extra singular rules tried before everything else

    Example:
        >>> inflector = Inflector(plural_overrides=[("octopus", "octopodes")])
        >>> inflector.plural("Octopus")
        "Octopodes"
    """

    def __init__(
        self,
        plural_rules: Iterable[tuple[RulePattern, str]] = PLURAL_RULES,
        singular_rules: Iterable[tuple[RulePattern, str]] = SINGULAR_RULES,
        irregulars: Iterable[tuple[str, str]] = IRREGULAR_PAIRS,
        uncountables: Iterable[RulePattern] = UNCOUNTABLE_WORDS,
        plural_overrides: Iterable[tuple[RulePattern, str]] = (),
        singular_overrides: Iterable[tuple[RulePattern, str]] = (),
    ):
        self._rules = build_rule_table(
            plural_rules,
            singular_rules,
            uncountables,
            plural_overrides=plural_overrides,
            singular_overrides=singular_overrides,
        )

        singles: dict[str, str] = {}
        plurals: dict[str, str] = {}
        for single, plural_form in irregulars:
            singles[single.lower()] = plural_form.lower()
            plurals[plural_form.lower()] = single.lower()

        self._irregular_singles: Mapping[str, str] = MappingProxyType(singles)
        self._irregular_plurals: Mapping[str, str] = MappingProxyType(plurals)

        logger.debug(
            f"Inflector ready: {len(self._rules.plural)} plural rules, "
            f"{len(self._rules.singular)} singular rules, "
            f"{len(singles)} irregulars, {len(self._rules.uncountables)} uncountables"
        )

    @property
    def plural_rules(self) -> tuple[Rule, ...]:
        return self._rules.plural

    @property
    def singular_rules(self) -> tuple[Rule, ...]:
        return self._rules.singular

    @property
    def irregular_singles(self) -> Mapping[str, str]:
        """Singular → plural irregular lookup."""
        return self._irregular_singles

    @property
    def irregular_plurals(self) -> Mapping[str, str]:
        """Plural → singular irregular lookup."""
        return self._irregular_plurals

    @property
    def uncountables(self) -> frozenset[str]:
        return self._rules.uncountables

    def plural(self, word: str) -> str:
        """
        Convert a word to its plural form.

        Examples:
            >>> inflector.plural("person")
            "people"

            >>> inflector.plural("User")
            "Users"

            >>> inflector.plural("staff")
            "staff"
        """
        return self._replace_word(
            word, self._irregular_singles, self._irregular_plurals, self._rules.plural
        )

    def singular(self, word: str) -> str:
        """
        Convert a word to its singular form.

        Examples:
            >>> inflector.singular("people")
            "person"

            >>> inflector.singular("CATEGORIES")
            "CATEGORY"
        """
        return self._replace_word(
            word, self._irregular_plurals, self._irregular_singles, self._rules.singular
        )

    def is_plural(self, word: str) -> bool:
        """
        Check whether a word is already in plural form.

        A word counts as plural when pluralizing it changes nothing. Words the
        rules cannot recognise (e.g. "address", which pluralizes to
        "addresses") therefore report False.
        """
        return self._check_word(
            word, self._irregular_singles, self._irregular_plurals, self._rules.plural
        )

    def is_singular(self, word: str) -> bool:
        """Check whether a word is already in singular form."""
        return self._check_word(
            word, self._irregular_plurals, self._irregular_singles, self._rules.singular
        )

    def safe_plural(self, word: str) -> str:
        """
        Append "s" to the word unless it is already plural.

        Keeps naming compatible with the naive "s" suffix while preventing
        double pluralization. This is NOT plural(): "address" becomes
        "addresss", not "addresses".

        Examples:
            >>> inflector.safe_plural("user")
            "users"

            >>> inflector.safe_plural("users")
            "users"

            >>> inflector.safe_plural("status")
            "statuss"
        """
        return word if self.is_plural(word) else f"{word}s"

    def _replace_word(
        self,
        word: str,
        replace_map: Mapping[str, str],
        keep_map: Mapping[str, str],
        rules: tuple[Rule, ...],
    ) -> str:
        token = word.lower()

        # Already in the requested form
        if token in keep_map:
            return restore_case(word, token)

        if token in replace_map:
            return restore_case(word, replace_map[token])

        return self._sanitize_word(token, word, rules)

    def _check_word(
        self,
        word: str,
        replace_map: Mapping[str, str],
        keep_map: Mapping[str, str],
        rules: tuple[Rule, ...],
    ) -> bool:
        token = word.lower()

        if token in keep_map:
            return True
        if token in replace_map:
            return False

        return self._sanitize_word(token, token, rules) == token

    def _sanitize_word(self, token: str, word: str, rules: tuple[Rule, ...]) -> str:
        """Run the rule cascade, leaving empty and uncountable words alone."""
        if not token or token in self._rules.uncountables:
            return word

        rule = find_rule(rules, word)
        if rule is None:
            return word

        return replace(word, rule)


# Default tables, built once at import
_default = Inflector()


def get_inflector() -> Inflector:
    """Return the shared default Inflector."""
    return _default


def plural(word: str) -> str:
    """Convert a word to its plural form using the default rules."""
    return get_inflector().plural(word)


def singular(word: str) -> str:
    """Convert a word to its singular form using the default rules."""
    return get_inflector().singular(word)


def is_plural(word: str) -> bool:
    return get_inflector().is_plural(word)


def is_singular(word: str) -> bool:
    return get_inflector().is_singular(word)


def safe_plural(word: str) -> str:
    """
    Append "s" unless the word is already plural.

    Used for table/model naming where legacy names were built by appending
    "s". safe_plural("user") == "users", safe_plural("users") == "users".
    """
    return get_inflector().safe_plural(word)
