# =============================================================================
# energy_agent/__init__.py
# =============================================================================
# An example consumer of the EnergyAtIt MCP server: a Google ADK agent that
# launches energy_mcp over stdio and answers operator questions with it.
#
# Nothing in energy_api/ or energy_mcp/ imports this package.  It exists so
# the tools can be exercised end to end by a real LLM (see main.py).
# =============================================================================
