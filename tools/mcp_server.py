# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (the single BlazeSQL tool)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes BlazeSQL's natural-language query API as ONE MCP tool,
#   "blazesql_query".  The tool is a thin wrapper around core/query_tool.py:
#   it forwards the two arguments, and maps the ToolResponse onto MCP
#   (plain text on success, ToolError → isError=True on failure).
#
# HOW IT WORKS (the flow):
#   1. The MCP client (Claude Desktop, an ADK agent, ...) calls
#      "blazesql_query" with db_id + natural_language_request
#   2. FastMCP routes the call to the decorated function below
#   3. core/query_tool.handle() validates, calls BlazeSQL once, formats
#   4. The client receives one text block, or an error-flagged result
#
# API KEY:
#   Loaded ONCE in main() (core/config.py).  A missing key stops the
#   process before the server starts, not per call.  The key is bound
#   into the tool via build_server(settings) and is only logged masked.
#
# RUNNING THIS SERVER:
#   a) Standalone:        python -m tools.mcp_server
#   b) Installed script:  blazesql-mcp-server
#   c) Spawned over stdio by an MCP client (see agent/query_agent.py)
# =============================================================================

import json
import logging
import sys
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core import blazesql, query_tool
from core.config import ConfigurationError, Settings, load_settings
from core.query_tool import Executor

SERVER_NAME = "blazesql-mcp-server"
TOOL_NAME = "blazesql_query"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#   - CYAN for incoming requests (tool name + parameters)
#   - YELLOW for intermediate status messages
#   - GREEN for responses
#   - RED for errors
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"     # Reset to default terminal color

logger = logging.getLogger("blazesql.mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the size of the response in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{_RESET}")
    return text


def _log_error(tool_name: str, text: str) -> None:
    logger.error(f"{_RED}  ← {tool_name} error: {json.dumps(text)}{_RESET}")


# =============================================================================
# Server factory
# =============================================================================
# build_server() instead of a module-level instance: the tool needs the
# API key, and the key only exists after main() has loaded it.  Tests
# build their own server with a fake key and a fake executor.
# =============================================================================
def build_server(settings: Settings, executor: Executor = blazesql.execute) -> FastMCP:
    """Create the FastMCP server with the blazesql_query tool registered."""
    mcp = FastMCP(SERVER_NAME)

    # =========================================================================
    # TOOL: blazesql_query
    # =========================================================================
    # The docstring and field descriptions are what the client's LLM reads
    # to decide WHEN to call this tool and WHAT to pass.
    # =========================================================================
    @mcp.tool(name=TOOL_NAME)
    async def blazesql_query(
        db_id: Annotated[
            str, Field(description="The ID of the BlazeSQL database connection to query.")
        ],
        natural_language_request: Annotated[
            str,
            Field(
                description=(
                    "The query expressed in natural language "
                    "(e.g., 'show me total users per city')."
                )
            ),
        ],
    ) -> str:
        """Executes a natural language query against a specified BlazeSQL database.

        BlazeSQL translates the question into SQL, runs it, and answers with:
          - a natural-language summary of the answer
          - the SQL query it generated
          - the result table (column name → list of values)

        Complex questions can take up to two minutes.
        """
        _log_request(TOOL_NAME, db_id=db_id, natural_language_request=natural_language_request)

        response = await query_tool.handle(
            {"db_id": db_id, "natural_language_request": natural_language_request},
            settings.api_key,
            executor=executor,
        )
        if response.is_error:
            _log_error(TOOL_NAME, response.text)
            raise ToolError(response.text)

        _log_status("BlazeSQL query successful")
        return _log_response(TOOL_NAME, response.text)

    _log_status(f"Tool '{TOOL_NAME}' registered")
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Load the API key, then serve the tool over stdio.  Exits 1 without a key."""
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.critical(f"{_RED}FATAL ERROR: {e}{_RESET}")
        sys.exit(1)

    logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))
    _log_status(f"API key loaded successfully ({settings.masked_api_key})")

    mcp = build_server(settings)
    _log_status("BlazeSQL MCP Server is running and connected via stdio")
    mcp.run()


if __name__ == "__main__":
    main()
