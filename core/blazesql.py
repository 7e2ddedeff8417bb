# =============================================================================
# core/blazesql.py  —  BlazeSQL Request Adapter (the only network call)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends ONE natural-language question to the BlazeSQL API and turns
#   whatever happens (success, remote error, timeout, broken connection,
#   garbage body) into exactly one QueryOutcome.
#
# CONTRACT:
#   execute() never raises for an expected failure.  Every path ends in
#   a QuerySuccess or a QueryFailure, so the MCP layer can't leak a stack
#   trace to the client.
#
# NO RETRIES:
#   One attempt per call.  BlazeSQL is rate-limited per hour.
#
# TIMEOUT:
#   The whole call (connect + send + wait + read) is bounded by
#   REQUEST_TIMEOUT_SECONDS, which must stay at or below BlazeSQL's own
#   processing ceiling.  Timeout → 504 ("slow query"); any other transport
#   failure → 500 ("broken network").
# =============================================================================

import asyncio
import logging
from typing import Any, Optional

import httpx

from core.models import QueryFailure, QueryOutcome, QuerySuccess

logger = logging.getLogger(__name__)

BLAZE_API_ENDPOINT = "https://api.blazesql.com/natural_language_query_api"
REQUEST_TIMEOUT_SECONDS = 120.0

_GENERIC_ERROR = "An unknown error occurred during the API request."


async def execute(
    db_id: str,
    question: str,
    credential: str,
    *,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
    endpoint: str = BLAZE_API_ENDPOINT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> QueryOutcome:
    """Run one natural-language query against BlazeSQL.

    Args:
        db_id: The BlazeSQL database connection ID.
        question: The question in plain language.
        credential: The BlazeSQL API key.  Passed in explicitly (never read
            from globals) so tests can substitute their own.
        timeout: Upper bound in seconds for the whole request.
        endpoint: The BlazeSQL API URL.
        transport: Optional httpx transport (tests use httpx.MockTransport).

    Returns:
        QuerySuccess on a successful answer, otherwise QueryFailure.
    """
    if not credential:
        return QueryFailure(message="credential missing", code=500)

    body = {
        "db_id": db_id,
        "natural_language_request": question,
        "api_key": credential,
    }

    logger.info("Sending request to BlazeSQL with %gs timeout (db_id=%s)", timeout, db_id)
    try:
        return await asyncio.wait_for(
            _post(endpoint, body, timeout, transport),
            timeout=timeout,
        )
    except (httpx.TimeoutException, asyncio.TimeoutError):
        logger.warning("BlazeSQL request timed out after %g seconds", timeout)
        return QueryFailure(
            message=(
                f"request timed out after {timeout:g} seconds. "
                "The query might be too complex or the API might be slow."
            ),
            code=504,
        )
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error querying BlazeSQL: %s", e)
        return QueryFailure(message=str(e) or _GENERIC_ERROR, code=500)


async def _post(
    endpoint: str,
    body: dict[str, str],
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport],
) -> QueryOutcome:
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(
            endpoint,
            json=body,
            headers={"Content-Type": "application/json"},
        )

    logger.info("Response status: %s", response.status_code)

    if not response.is_success:
        return _error_from_response(response)

    data = response.json()
    if not isinstance(data, dict):
        raise ValueError("Unexpected response body from BlazeSQL (expected a JSON object).")
    return _outcome_from_body(data)


def _error_from_response(response: httpx.Response) -> QueryFailure:
    """Build a failure from a non-2xx response, preferring BlazeSQL's own error body."""
    status = response.status_code
    try:
        data = response.json()
    except ValueError:
        data = None

    if not isinstance(data, dict):
        return QueryFailure(
            message=f"HTTP error, status {status}. Failed to parse error response.",
            code=status,
        )
    return QueryFailure(
        message=data.get("error") or f"HTTP error, status {status}",
        code=_as_code(data.get("error_code"), status),
    )


def _outcome_from_body(data: dict[str, Any]) -> QueryOutcome:
    # The remote contract is trusted as-is; only the success tag is inspected.
    if not data.get("success"):
        return QueryFailure(
            message=data.get("error") or "BlazeSQL reported an unsuccessful query.",
            code=_as_code(data.get("error_code"), 500),
        )
    return QuerySuccess(
        summary=data.get("agent_response") or "",
        generated_query=data.get("query") or "",
        result_table=data.get("data_result") or {},
        message=data.get("message") or "",
    )


def _as_code(value: Any, fallback: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value == 0:
        return fallback
    return value
