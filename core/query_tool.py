# =============================================================================
# core/query_tool.py  —  Tool Facade (validate in, format out)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sits between the MCP tool and the BlazeSQL adapter:
#     1. Validates the raw tool arguments (two non-empty strings)
#     2. Calls the adapter ONCE with the process-wide API key
#     3. Turns the QueryOutcome into a single text block + error flag
#
# WHY IT'S IN core/ (AND NOT IN tools/):
#   Validation and formatting are plain Python.  Keeping them here means
#   the tests can drive handle() with a fake executor and no MCP server.
#   tools/mcp_server.py only maps ToolResponse onto the MCP result.
#
# OUTPUT FORMAT (fixed order, the client's LLM reads it top to bottom):
#
#     **Summary:**
#     <BlazeSQL's natural-language answer>
#
#     **Generated SQL:**
#     ```sql
#     <query>
#     ```
#
#     **Data Result:**
#     ```json
#     <column-oriented table, indented>
#     ```
# =============================================================================

import json
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from core import blazesql
from core.models import QueryFailure, QueryOutcome, QueryRequest, QuerySuccess, ToolResponse

logger = logging.getLogger(__name__)

Executor = Callable[[str, str, str], Awaitable[QueryOutcome]]

REQUIRED_FIELDS = ("db_id", "natural_language_request")


class InvalidArgumentError(ValueError):
    """A required tool argument is missing, empty, or not a string."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing or invalid '{field_name}' argument.")


def parse_request(raw_args: Optional[Mapping[str, Any]]) -> QueryRequest:
    """Build a QueryRequest, rejecting missing, empty or non-string fields."""
    args = raw_args or {}
    for name in REQUIRED_FIELDS:
        value = args.get(name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError(name)
    return QueryRequest(
        db_id=args["db_id"],
        natural_language_request=args["natural_language_request"],
    )


def format_success(outcome: QuerySuccess) -> str:
    table = json.dumps(outcome.result_table, indent=2, ensure_ascii=False)
    return (
        f"**Summary:**\n{outcome.summary}\n\n"
        f"**Generated SQL:**\n```sql\n{outcome.generated_query}\n```\n\n"
        f"**Data Result:**\n```json\n{table}\n```"
    )


def format_failure(outcome: QueryFailure) -> str:
    return f"BlazeSQL API Error (code {outcome.code}): {outcome.message}"


async def handle(
    raw_args: Optional[Mapping[str, Any]],
    credential: str,
    *,
    executor: Executor = blazesql.execute,
) -> ToolResponse:
    """Validate one tool call, run it, and format the result.

    Never raises for bad input or a failed query; both come back as a
    ToolResponse with is_error=True.
    """
    try:
        request = parse_request(raw_args)
    except InvalidArgumentError as e:
        logger.warning("Rejected tool call: %s", e)
        return ToolResponse(text=str(e), is_error=True)

    logger.info("Executing BlazeSQL query for DB ID: %s", request.db_id)
    logger.info('Natural Language Request: "%s"', request.natural_language_request)

    outcome = await executor(request.db_id, request.natural_language_request, credential)

    if isinstance(outcome, QuerySuccess):
        logger.info("BlazeSQL query successful (%d columns)", len(outcome.result_table))
        return ToolResponse(text=format_success(outcome))

    logger.error("BlazeSQL API Error (Code %s): %s", outcome.code, outcome.message)
    return ToolResponse(text=format_failure(outcome), is_error=True)
