"""
Numerus - English inflection for consistent schema naming

Pluralizes and singularizes English nouns with an ordered rule cascade and
exception tables, and resolves model/table names for plural-named schemas.
Also exposed as a small MCP server (see numerus.server).
"""

__version__ = "0.1.0"

# DO NOT import the server here - importing numerus must not configure logging
# or create the FastMCP instance. Engine users import numerus.inflection.

__all__ = ["__version__"]
