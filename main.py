# =============================================================================
# main.py  —  Interactive Entry Point for the Energy Operations Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (OPENROUTER_API_KEY, ENERGYATIT_API_KEY, ...)
#   2. Creates the Google ADK agent (energy_agent/operations_agent.py),
#      which spawns the EnergyAtIt MCP server over stdio
#   3. Reads operator questions from the terminal
#   4. Streams the agent's tool calls and prints its final answer
#
# The MCP server itself can also be run on its own for any MCP client:
#   python -m energy_mcp
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run before the agent is created: LiteLlm and the spawned MCP server
# both read their credentials from the environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from energy_agent.operations_agent import create_agent

APP_NAME = "energyatit_operations"
USER_ID = "operator"


async def run_agent():
    """Run the energy operations agent interactively."""
    print("=" * 70)
    print("  ENERGYATIT OPERATIONS AGENT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about your sites, assets, DR events, settlements or carbon records.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
