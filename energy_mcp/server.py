# =============================================================================
# energy_mcp/server.py  —  FastMCP Server for the EnergyAtIt Platform
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server (tools + the overview resource) around an
#   EnergyApiClient, and provides the process entry point.
#
# STARTUP SEQUENCE (main):
#   1. Load .env, then resolve Settings from the environment (once)
#   2. Log demo-mode status and the resolved base URL to STDERR
#   3. Create the shared httpx client (with the proxy, if any)
#   4. Run the stdio transport until the client disconnects
#
# EXIT CODES:
#   0 → clean shutdown (transport closed, or Ctrl-C)
#   1 → configuration or transport failure at startup
#
# RUNNING THIS SERVER:
#     a) python -m energy_mcp
#     b) energyatit-mcp            (console script from pyproject.toml)
#     c) Spawned over stdio by the operations agent (energy_agent/)
# =============================================================================

import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from energy_api import EnergyApiClient, Settings, __version__
from energy_mcp.logs import configure_logging, logger
from energy_mcp.resources import register_resources
from energy_mcp.tools import register_tools

SERVER_NAME = "energyatit"

INSTRUCTIONS = (
    "Tools for the EnergyAtIt energy infrastructure platform: sites, assets, "
    "dispatch, settlements, carbon attestation, demand response, compliance, "
    "reliability intel, procurement and integrations. Read "
    "energyatit://overview for the connection details."
)


def create_server(settings: Settings, api: Optional[EnergyApiClient] = None) -> FastMCP:
    """Build the MCP server.

    If ``api`` is not given, a client is created from ``settings`` and
    closed when the server shuts down.  A client passed in stays owned by
    the caller.
    """
    owns_client = api is None
    client = api if api is not None else EnergyApiClient(settings)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict]:
        try:
            yield {}
        finally:
            if owns_client:
                await client.aclose()

    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS, lifespan=lifespan)
    register_tools(mcp, client)
    register_resources(mcp, settings)
    return mcp


def log_startup(settings: Settings) -> None:
    if settings.demo_mode:
        logger.warning("No API key set — running in demo mode (read-only public data).")
        logger.warning(
            "Set ENERGYATIT_API_KEY for full access, or call provision_sandbox "
            "to get a sandbox key."
        )
    if settings.proxy_url:
        logger.info("Routing outbound requests through proxy %s", settings.proxy_url)
    logger.info("EnergyAtIt MCP server v%s — connecting to %s", __version__, settings.base_url)


def main() -> None:
    load_dotenv()

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    log_startup(settings)

    try:
        mcp = create_server(settings)
        logger.info("EnergyAtIt MCP server running on stdio")
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
