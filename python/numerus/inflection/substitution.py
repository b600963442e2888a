"""
Template substitution for matched inflection rules.
"""

import re

from .casing import restore_case
from .rules import Rule

_BACKREFERENCE = re.compile(r"\$(\d{1,2})")


def interpolate(template: str, match: re.Match) -> str:
    """
    Expand $N back-references in a rule template.

    $0 is the whole match, $1..$99 are capture groups. Groups that did not
    take part in the match, or do not exist at all, expand to "".
    """

    def _group(ref: re.Match) -> str:
        index = int(ref.group(1))
        if index > match.re.groups:
            return ""
        return match.group(index) or ""

    return _BACKREFERENCE.sub(_group, template)


def replace(word: str, rule: Rule) -> str:
    """
    Apply ``rule`` to the first match inside ``word``.

    The replacement takes the casing of the text it replaces. A zero-width
    match (e.g. ``s?$`` against "user") has no text of its own, so the
    character right before the match position drives the casing instead.

    Examples:
        >>> replace("Box", Rule(re.compile(r"(x|ch|ss|sh|zz)$", re.I), "$1es"))
        "Boxes"

        >>> replace("USER", Rule(re.compile(r"s?$", re.I), "s"))
        "USERS"
    """

    def _substitute(match: re.Match) -> str:
        result = interpolate(rule.replacement, match)
        matched = match.group(0)

        if matched == "":
            index = match.start()
            previous = word[index - 1] if index > 0 else ""
            return restore_case(previous, result)

        return restore_case(matched, result)

    return rule.pattern.sub(_substitute, word, count=1)
