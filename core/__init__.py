# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the BlazeSQL query logic.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK or FastMCP.  The adapter
#   (blazesql.py) talks HTTP via httpx; the facade (query_tool.py) is
#   plain Python.  Both can be driven from a test with a fake transport
#   or a fake executor, no MCP server required.
#
# Why?  The protocol is just the wiring; the request/response translation
# is the part worth testing in isolation.
# =============================================================================
