# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains a demo MCP client: a Google ADK agent that uses the
# blazesql_query tool to answer questions about a BlazeSQL database.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is NOT part of the server.  It exists so the server can
#   be exercised end to end from a terminal (main.py) without Claude Desktop.
#   It:
#     1. Receives the user's question ("how many signups last week?")
#     2. Calls blazesql_query over MCP
#     3. Explains the answer, the SQL and the data
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the query logic (that's in core/)
#   - It is NOT the tool implementation (that's in tools/)
# =============================================================================
