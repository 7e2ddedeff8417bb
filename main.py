# =============================================================================
# main.py  —  Entry Point for the BlazeSQL Query Assistant (demo client)
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/query_agent.py)
#   2. ADK spawns the MCP server (tools/mcp_server.py) over stdio
#   3. You type a question about your data
#   4. The agent calls blazesql_query and explains the result
#
# ENVIRONMENT (.env is loaded automatically):
#   BLAZE_API_KEY        required by the MCP server
#   OPENROUTER_API_KEY   read by LiteLlm for the default model
#   BLAZESQL_DB_ID       optional default database ID for the agent
#   QUERY_AGENT_MODEL    optional LiteLlm model string
#
# To use the server from Claude Desktop instead, point its MCP config at
# `blazesql-mcp-server` (or `python -m tools.mcp_server`).
# =============================================================================

import asyncio
import os

from dotenv import load_dotenv

# Must happen BEFORE creating the agent: LiteLlm reads its key from the
# environment, and the server subprocess inherits BLAZE_API_KEY from us.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.query_agent import create_agent

APP_NAME = "blazesql_assistant"
USER_ID = "demo_user"


async def run_agent():
    """Run the BlazeSQL query assistant interactively."""
    print("=" * 70)
    print("  BLAZESQL QUERY ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent(default_db_id=os.getenv("BLAZESQL_DB_ID") or None)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask a question about your data!")
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

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # Only the last text part is shown; tool calls are echoed as they happen.
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
