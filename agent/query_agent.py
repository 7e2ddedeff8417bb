# =============================================================================
# agent/query_agent.py  —  Google ADK Agent Configuration (demo MCP client)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds a Google ADK agent that talks to OUR MCP server the same way any
#   MCP client (e.g. Claude Desktop) would: it spawns tools/mcp_server.py
#   over stdio and discovers the blazesql_query tool.
#
#   ┌──────────────────────┐   stdio (MCP)   ┌──────────────────────┐   HTTPS   ┌──────────┐
#   │  ADK Agent (LiteLlm) │ ──────────────▶ │  FastMCP server      │ ────────▶ │ BlazeSQL │
#   │  agent/query_agent   │ ◀────────────── │  tools/mcp_server.py │ ◀──────── │   API    │
#   └──────────────────────┘                 └──────────────────────┘           └──────────┘
#
# MODEL:
#   LiteLlm lets ADK use any provider.  The default routes GPT-4o through
#   OpenRouter (reads OPENROUTER_API_KEY); override with QUERY_AGENT_MODEL.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_query_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"
MODEL_ENV_VAR = "QUERY_AGENT_MODEL"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK should launch the MCP server subprocess.

    "uv run" makes the subprocess use the project's .venv.  The server is
    started as a module from the project root so `core` and `tools` import.
    The parent environment is passed through so BLAZE_API_KEY reaches it.
    """
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env=dict(os.environ),
    )


def create_agent(default_db_id: Optional[str] = None, model: Optional[str] = None) -> Agent:
    """Create the BlazeSQL query assistant agent.

    Args:
        default_db_id: BlazeSQL database ID the agent should use unless told otherwise.
        model: LiteLlm model string; defaults to $QUERY_AGENT_MODEL or GPT-4o via OpenRouter.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="blazesql_query_assistant",
        model=LiteLlm(model=model or os.getenv(MODEL_ENV_VAR, DEFAULT_MODEL)),
        instruction=get_query_assistant_prompt(default_db_id),
        tools=[mcp_tools],
    )
