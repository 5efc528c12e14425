# =============================================================================
# energy_agent/operations_agent.py  —  Google ADK Agent over the MCP Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures the Google ADK agent that talks to operators and calls the
#   EnergyAtIt tools.  The agent has no HTTP code of its own: every
#   platform action goes through the MCP server in energy_mcp/.
#
#   ┌───────────────────────────┐      stdio       ┌──────────────────────┐
#   │  Google ADK Agent         │ ───────────────▶ │  energy_mcp server   │
#   │  (LiteLlm model + prompt) │   MCP tool calls │  (FastMCP)           │
#   └───────────────────────────┘                  └──────────┬───────────┘
#                                                             │ HTTPS
#                                                             ▼
#                                                  ┌──────────────────────┐
#                                                  │  EnergyAtIt REST API │
#                                                  └──────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess ("python -m energy_mcp") and
#   talks to it over stdin/stdout.  The subprocess inherits this process's
#   environment, so ENERGYATIT_* variables (and any .env already loaded)
#   reach the server unchanged.
#
# MODEL:
#   Any LiteLlm model string works.  The default routes GPT-4o through
#   OpenRouter; LiteLlm reads OPENROUTER_API_KEY from the environment.
#   Override with ENERGYATIT_AGENT_MODEL.
# =============================================================================

import os
import sys
from typing import Mapping, Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from energy_agent.prompt import get_operations_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def server_parameters(environ: Optional[Mapping[str, str]] = None) -> StdioServerParameters:
    """How ADK should launch the EnergyAtIt MCP server subprocess."""
    env = dict(os.environ if environ is None else environ)
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return StdioServerParameters(
        command=sys.executable,                 # same interpreter, same venv
        args=["-m", "energy_mcp"],
        env=env,
        cwd=project_root,
    )


def create_agent(environ: Optional[Mapping[str, str]] = None) -> Agent:
    """Create the energy operations agent.

    Returns:
        A configured Google ADK Agent with the EnergyAtIt MCP toolset.
    """
    env = os.environ if environ is None else environ

    mcp_tools = MCPToolset(connection_params=server_parameters(env))

    return Agent(
        name="energy_operations_agent",
        model=LiteLlm(model=env.get("ENERGYATIT_AGENT_MODEL") or DEFAULT_MODEL),
        instruction=get_operations_prompt(),
        tools=[mcp_tools],
    )
