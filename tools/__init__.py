# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrapper.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and the
#   core query logic.  mcp_server.py:
#     1. Registers blazesql_query with FastMCP
#     2. Forwards its arguments to core/query_tool.handle()
#     3. Maps the ToolResponse onto MCP (text, or ToolError → isError)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate or format (that's core/query_tool.py)
#   - They do NOT talk HTTP (that's core/blazesql.py)
#   - They do NOT know about Google ADK (any MCP client can connect)
# =============================================================================
