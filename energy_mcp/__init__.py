# =============================================================================
# energy_mcp/__init__.py
# =============================================================================
# This package is the MCP-facing shell around energy_api/.
#
# ARCHITECTURAL ROLE:
#   energy_mcp/ is the translation layer between the agent and the
#   EnergyAtIt REST API.  It:
#     1. Registers one FastMCP tool per catalog operation
#     2. Registers the energyatit://overview resource
#     3. Converts adapter failures into MCP error results
#     4. Owns process startup, logging and exit codes
#
# WHAT IT DOES NOT DO:
#   - No HTTP details (that's energy_api/)
#   - No domain logic (that's the remote platform)
# =============================================================================

from energy_mcp.server import create_server, main

__all__ = ["create_server", "main"]
