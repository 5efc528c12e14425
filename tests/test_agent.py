"""Tests for the operations agent configuration (no LLM calls are made)."""

import sys
from datetime import date

import pytest

from energy_agent.prompt import get_operations_prompt


@pytest.fixture
def agent_module():
    pytest.importorskip("google.adk")
    from energy_agent import operations_agent

    return operations_agent


def test_prompt_injects_today_and_confirmation_rule():
    prompt = get_operations_prompt()

    assert date.today().isoformat() in prompt
    assert "STATE-CHANGING TOOLS NEED CONFIRMATION" in prompt
    assert "provision_sandbox" in prompt


def test_server_parameters_launch_energy_mcp_module(agent_module):
    params = agent_module.server_parameters({"ENERGYATIT_API_KEY": "k"})

    assert params.command == sys.executable
    assert params.args == ["-m", "energy_mcp"]
    assert params.env == {"ENERGYATIT_API_KEY": "k"}


def test_create_agent_uses_configured_model(agent_module):
    agent = agent_module.create_agent(
        {"ENERGYATIT_AGENT_MODEL": "openrouter/anthropic/claude-3.5-sonnet"}
    )

    assert agent.name == "energy_operations_agent"
    assert agent.model.model == "openrouter/anthropic/claude-3.5-sonnet"
    assert len(agent.tools) == 1


def test_create_agent_default_model(agent_module):
    agent = agent_module.create_agent({})
    assert agent.model.model == agent_module.DEFAULT_MODEL
