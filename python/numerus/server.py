"""
Numerus MCP Server - FastMCP implementation

Exposes the inflection engine and the model name resolver as MCP tools.

CRITICAL: This is an MCP server - NEVER use print() statements!
stdout is reserved for JSON-RPC in stdio mode. Use logger instead.
"""

import os
import sys

from fastmcp import FastMCP

from numerus.logging_config import setup_logging
from numerus.tools_wrappers import check_number, inflect, model_names

# Initialize logging FIRST (before any other operations)
logger = setup_logging()

mcp = FastMCP(
    "Numerus Inflection Server",
    instructions=(
        "English inflection for schema naming. Use `inflect` to pluralize or "
        "singularize words, `check_number` to test whether a word is already "
        "plural, and `model_names` to resolve table names for schema models."
    ),
)
logger.info("FastMCP server created")

# output_schema=None keeps text results as raw strings (no {"result": ...} wrapper)
mcp.tool(output_schema=None)(inflect)
mcp.tool(output_schema=None)(check_number)
mcp.tool(output_schema=None)(model_names)

__all__ = ["mcp", "inflect", "check_number", "model_names", "main", "main_http"]


def main():
    """Main entry point for the stdio MCP server."""
    logger.info("Starting Numerus MCP server (stdio)")

    # Suppress FastMCP banner to keep stdout clean for MCP protocol
    try:
        mcp.run(show_banner=False)
    except BrokenPipeError:
        # Client disconnected - exit cleanly without stack trace
        sys.stderr.write("Client disconnected. Shutting down.\n")
        sys.exit(0)


def main_http(host: str = None, port: int = None):
    """
    HTTP entry point, allowing several clients to share one server.

    Args:
        host: Host to bind to (default: 127.0.0.1, or NUMERUS_HOST env var)
        port: Port to listen on (default: 8766, or NUMERUS_PORT env var)
    """
    host = host or os.environ.get("NUMERUS_HOST", "127.0.0.1")
    port = port or int(os.environ.get("NUMERUS_PORT", "8766"))

    setup_logging(console=True)
    logger.info(f"Starting Numerus MCP server (HTTP) on http://{host}:{port}/mcp")

    try:
        mcp.run(transport="http", host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Shutting down Numerus HTTP server...")


def main_http_cli():
    """
    CLI entry point with argument parsing for the HTTP server.

    Usage:
        numerus-server-http --host 0.0.0.0 --port 8766

    Or via environment variables:
        NUMERUS_HOST=0.0.0.0 NUMERUS_PORT=8766 numerus-server-http
    """
    import argparse

    parser = argparse.ArgumentParser(description="Numerus MCP Server (HTTP mode)")
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: 127.0.0.1, or NUMERUS_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: 8766, or NUMERUS_PORT env var)",
    )
    args = parser.parse_args()
    main_http(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
