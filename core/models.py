# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through one BlazeSQL tool call:
#
#     QueryRequest  →  (one HTTP POST)  →  QueryOutcome  →  ToolResponse
#
# LIFETIME:
#   Every object here lives for exactly one tool call and is never mutated
#   (frozen=True).  Concurrent calls share only the read-only API key.
#
# THE OUTCOME IS A SUM TYPE, NOT AN EXCEPTION:
#   The adapter returns either a QuerySuccess or a QueryFailure, and the
#   caller branches with isinstance().  Exceptions are reserved for
#   programmer errors and for the MCP boundary (ToolError).
# =============================================================================

from dataclasses import dataclass, field
from typing import Union


# A single cell in BlazeSQL's column-oriented result table.
Scalar = Union[str, int, float, bool, None]


# -----------------------------------------------------------------------------
# QueryRequest — what the client asked for
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class QueryRequest:
    """One natural-language question against one BlazeSQL database."""

    db_id: str                         # BlazeSQL database connection ID
    natural_language_request: str      # e.g. "show me total users per city"


# -----------------------------------------------------------------------------
# QuerySuccess — the remote answered the question
# -----------------------------------------------------------------------------
# BlazeSQL returns three useful things: a plain-English answer, the SQL it
# wrote, and the rows it got back.  The rows arrive column-oriented:
#
#     {"city": ["Paris", "Oslo"], "users": [120, 45]}
#
# We keep that shape as-is; the facade only re-serializes it for display.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class QuerySuccess:
    """A fully populated successful answer from BlazeSQL."""

    summary: str                       # agent_response: natural-language answer
    generated_query: str               # query: the SQL BlazeSQL generated
    result_table: dict[str, list[Scalar]] = field(default_factory=dict)
    message: str = ""                  # remote status message, informational only


# -----------------------------------------------------------------------------
# QueryFailure — anything that went wrong, local or remote
# -----------------------------------------------------------------------------
# `code` follows HTTP conventions so the two origins share one vocabulary:
#   - remote errors carry BlazeSQL's own error_code (e.g. 403)
#   - 504 means our local timeout fired ("slow query", not "broken network")
#   - 500 is the catch-all for transport/parse failures and a missing key
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class QueryFailure:
    """A failed query, with a human-readable message and an HTTP-style code."""

    message: str
    code: int


QueryOutcome = Union[QuerySuccess, QueryFailure]


# -----------------------------------------------------------------------------
# ToolResponse — what goes back over MCP
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResponse:
    """A single text payload plus the MCP error flag."""

    text: str
    is_error: bool = False
