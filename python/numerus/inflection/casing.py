"""
Case restoration for inflected words.
"""


def restore_case(word: str, token: str) -> str:
    """
    Reapply the capitalization style of ``word`` onto ``token``.

    Args:
        word: Original text (the query word or the matched substring)
        token: Replacement text, usually derived from lowercase data

    Returns:
        ``token`` reshaped to look like ``word``

    Examples:
        >>> restore_case("USER", "users")
        "USERS"

        >>> restore_case("Person", "people")
        "People"

        >>> restore_case("iPhone", "iphones")
        "iphones"

    Edge Cases:
        - Identical text: returned untouched ("$0" rules keep odd casing)
        - Empty word: treated as lowercase
        - Mixed case that is not title case: lowercased
    """
    if word == token:
        return token

    if word == word.lower():
        return token.lower()

    if word == word.upper():
        return token.upper()

    # Title case: only the first character is significant
    if word[0] == word[0].upper():
        return token[:1].upper() + token[1:].lower()

    return token.lower()
