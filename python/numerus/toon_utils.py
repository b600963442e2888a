"""
Output formatting for MCP tools.

Every tool builds one list of flat row dicts and lets format_rows() render it:
- text: one line per row via the tool's formatter (default)
- json: the rows themselves
- toon: TOON-encoded rows (compact tabular format), JSON on encoder failure
"""

from typing import Any, Callable, Optional, Union

from numerus.logging_config import get_logger

logger = get_logger(__name__)

Rows = list[dict[str, Any]]


def format_rows(
    rows: Rows,
    output_format: Optional[str],
    tool_name: str,
    text_formatter: Optional[Callable[[dict[str, Any]], str]] = None,
) -> Union[str, Rows]:
    """
    Render tool rows as text, TOON, or JSON.

    Args:
        rows: Flat dicts (primitive values only, so TOON can tabulate them)
        output_format: "text" (default), "json", or "toon"
        tool_name: Tool name for logging
        text_formatter: Function(row) -> line for text mode

    Returns:
        - text: newline-joined lines
        - toon: TOON string
        - json: rows unchanged
    """
    if output_format in (None, "text"):
        if text_formatter is None:
            logger.warning(f"{tool_name} has no text formatter, falling back to JSON")
            return rows
        return "\n".join(text_formatter(row) for row in rows)

    if output_format == "toon":
        from toon_format import encode as toon_encode

        try:
            return toon_encode({tool_name: rows})
        except Exception as e:
            logger.warning(f"{tool_name} TOON encoding failed, falling back to JSON: {e}")
            return rows

    return rows
