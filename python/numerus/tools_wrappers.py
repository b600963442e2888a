"""
Numerus MCP tool wrappers - thin delegating functions for FastMCP.

The tools do no I/O: they call the inflection engine or the model name
resolver and format the rows. Bad input never raises to the client; problems
come back as readable text (and are logged).
"""

from typing import Any, Literal, Optional, Union

from numerus.inflection import get_inflector
from numerus.logging_config import get_logger
from numerus.naming import ModelNotFoundError, init_get_model_name
from numerus.toon_utils import format_rows

logger = get_logger(__name__)

OutputFormat = Literal["text", "json", "toon"]


def _as_list(words: Union[str, list[str]]) -> list[str]:
    if isinstance(words, str):
        return [words]
    return list(words)


async def inflect(
    words: Union[str, list[str]],
    direction: Literal["plural", "singular", "safe_plural"] = "plural",
    output_format: OutputFormat = "text",
) -> Union[str, list[dict[str, Any]]]:
    """
    Convert English words to plural or singular form.

    Casing is preserved: "User" → "Users", "PERSON" → "PEOPLE".

    Direction (default: plural):
    - plural: full rule-based plural ("address" → "addresses")
    - singular: full rule-based singular ("categories" → "category")
    - safe_plural: naive table-name plural, appends "s" unless already plural
      ("user" → "users", "users" → "users", "address" → "addresss")

    Examples:
        inflect("person")                          # person → people
        inflect(["users", "mice"], "singular")     # users → user, mice → mouse
        inflect(["user", "staff"], "safe_plural")  # user → users, staff → staff

    Args:
        words: One word or a list of words
        direction: "plural" (default), "singular", or "safe_plural"
        output_format: "text" (default), "json", or "toon"

    Returns:
        Text lines "word → result", JSON rows, or a TOON table
    """
    inflector = get_inflector()
    convert = {
        "plural": inflector.plural,
        "singular": inflector.singular,
        "safe_plural": inflector.safe_plural,
    }.get(direction)

    if convert is None:
        logger.warning(f"inflect called with unknown direction {direction!r}")
        return f"Unknown direction '{direction}'. Use 'plural', 'singular', or 'safe_plural'."

    rows = [{"word": word, "result": convert(word)} for word in _as_list(words)]
    logger.debug(f"inflect[{direction}] {len(rows)} word(s)")

    return format_rows(
        rows,
        output_format,
        tool_name="inflect",
        text_formatter=lambda row: f"{row['word']} → {row['result']}",
    )


def _describe_number(row: dict[str, Any]) -> str:
    forms = [name for name in ("plural", "singular") if row[f"is_{name}"]]
    return f"{row['word']}: {', '.join(forms) if forms else 'unknown'}"


async def check_number(
    words: Union[str, list[str]],
    output_format: OutputFormat = "text",
) -> Union[str, list[dict[str, Any]]]:
    """
    Check whether words are already plural and/or singular.

    A word counts as plural when pluralizing it changes nothing (and likewise
    for singular). Uncountable words ("staff", "sheep") are therefore both.

    Examples:
        check_number("users")               # users: plural
        check_number(["user", "sheep"])     # user: singular / sheep: plural, singular

    Args:
        words: One word or a list of words
        output_format: "text" (default), "json", or "toon"

    Returns:
        Text lines "word: plural, singular", JSON rows, or a TOON table
    """
    inflector = get_inflector()
    rows = [
        {
            "word": word,
            "is_plural": inflector.is_plural(word),
            "is_singular": inflector.is_singular(word),
        }
        for word in _as_list(words)
    ]

    return format_rows(rows, output_format, tool_name="check_number", text_formatter=_describe_number)


async def model_names(
    models: Union[str, list[str]],
    use_plural: bool = True,
    schema: Optional[dict[str, str]] = None,
    output_format: OutputFormat = "text",
) -> Union[str, list[dict[str, Any]]]:
    """
    Resolve table names for schema models.

    With use_plural the declared name gets safe_plural() ("user" → "users",
    "users" → "users"); otherwise it is returned as declared.

    Examples:
        model_names(["user", "session"])                   # user → users, ...
        model_names("user", schema={"user": "app_user"})   # user → app_users
        model_names("user", use_plural=False)              # user → user

    Args:
        models: Model keys or declared names to resolve
        use_plural: Pluralize table names (default: True)
        schema: Logical key → declared model name. Defaults to each model
            declaring itself.
        output_format: "text" (default), "json", or "toon"

    Returns:
        Text lines "model → table", JSON rows, or a TOON table. Unknown models
        are reported inline with their error.
    """
    requested = _as_list(models)
    if schema is None:
        schema = {model: model for model in requested}

    get_model_name = init_get_model_name(use_plural=use_plural, schema=schema)

    rows = []
    for model in requested:
        try:
            rows.append({"model": model, "name": get_model_name(model), "error": ""})
        except ModelNotFoundError as e:
            rows.append({"model": model, "name": "", "error": str(e)})

    def _line(row: dict[str, Any]) -> str:
        if row["error"]:
            return f"{row['model']}: {row['error']}"
        return f"{row['model']} → {row['name']}"

    return format_rows(rows, output_format, tool_name="model_names", text_formatter=_line)
