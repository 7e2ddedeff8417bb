"""Shared fixtures: a fake BlazeSQL endpoint built on httpx.MockTransport."""

import json

import httpx
import pytest

from core.models import QueryFailure, QuerySuccess

SUCCESS_BODY = {
    "success": True,
    "message": "Query executed successfully",
    "query": "SELECT city, COUNT(*) AS users FROM users GROUP BY city",
    "agent_response": "Paris has the most users, followed by Oslo.",
    "data_result": {"city": ["Paris", "Oslo"], "users": [120, 45]},
}


class FakeBlazeSQL:
    """Records every request and answers with a canned response."""

    def __init__(self, handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_blazesql():
    """Factory: fake_blazesql(status, json=..., text=...) or fake_blazesql(handler=fn)."""

    def make(status=200, json=None, text=None, handler=None):
        if handler is None:
            def handler(request):
                if json is not None:
                    return httpx.Response(status, json=json)
                return httpx.Response(status, text=text or "")
        return FakeBlazeSQL(handler)

    return make


class RecordingExecutor:
    """Stands in for blazesql.execute and remembers how it was called."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    async def __call__(self, db_id, question, credential):
        self.calls.append((db_id, question, credential))
        return self.outcome


@pytest.fixture
def success_outcome():
    return QuerySuccess(
        summary=SUCCESS_BODY["agent_response"],
        generated_query=SUCCESS_BODY["query"],
        result_table=SUCCESS_BODY["data_result"],
        message=SUCCESS_BODY["message"],
    )


@pytest.fixture
def failure_outcome():
    return QueryFailure(message="Invalid API key", code=403)
