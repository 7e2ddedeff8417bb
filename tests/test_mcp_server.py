"""
Tests for the FastMCP binding (tools/mcp_server.py).

The server runs in-memory through fastmcp.Client; the BlazeSQL call is
replaced by a RecordingExecutor.
"""

import pytest
from fastmcp import Client

from core import config
from core.config import Settings
from tests.conftest import RecordingExecutor
from tools import mcp_server

API_KEY = "test-api-key-123456"
VALID_ARGS = {"db_id": "db_42", "natural_language_request": "total users per city"}


def make_server(outcome):
    executor = RecordingExecutor(outcome)
    return mcp_server.build_server(Settings(api_key=API_KEY), executor=executor), executor


@pytest.mark.asyncio
async def test_lists_exactly_one_tool(success_outcome):
    server, _ = make_server(success_outcome)

    async with Client(server) as client:
        tools = await client.list_tools()

    assert [tool.name for tool in tools] == ["blazesql_query"]
    schema = tools[0].inputSchema
    assert set(schema["required"]) == {"db_id", "natural_language_request"}
    assert schema["properties"]["db_id"]["type"] == "string"
    assert "natural language" in tools[0].description


@pytest.mark.asyncio
async def test_successful_call_returns_formatted_text(success_outcome):
    server, executor = make_server(success_outcome)

    async with Client(server) as client:
        result = await client.call_tool_mcp("blazesql_query", VALID_ARGS)

    assert result.isError is False
    text = result.content[0].text
    assert text.startswith("**Summary:**")
    assert success_outcome.generated_query in text
    assert executor.calls == [("db_42", "total users per city", API_KEY)]


@pytest.mark.asyncio
async def test_remote_failure_is_flagged_not_raised(failure_outcome):
    server, _ = make_server(failure_outcome)

    async with Client(server) as client:
        result = await client.call_tool_mcp("blazesql_query", VALID_ARGS)

    assert result.isError is True
    assert "Invalid API key" in result.content[0].text
    assert "403" in result.content[0].text


@pytest.mark.asyncio
async def test_empty_argument_is_rejected_before_executor(success_outcome):
    server, executor = make_server(success_outcome)

    async with Client(server) as client:
        result = await client.call_tool_mcp(
            "blazesql_query", {"db_id": "", "natural_language_request": "q"}
        )

    assert result.isError is True
    assert "db_id" in result.content[0].text
    assert executor.calls == []


@pytest.mark.asyncio
async def test_missing_argument_is_rejected_before_executor(success_outcome):
    server, executor = make_server(success_outcome)

    async with Client(server) as client:
        result = await client.call_tool_mcp("blazesql_query", {"db_id": "db_42"})

    assert result.isError is True
    assert executor.calls == []


def test_main_exits_without_api_key(monkeypatch):
    monkeypatch.delenv(config.API_KEY_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda **kw: False)
    monkeypatch.setattr(
        mcp_server, "build_server", lambda *a, **kw: pytest.fail("server built without a key")
    )

    with pytest.raises(SystemExit) as exc_info:
        mcp_server.main()

    assert exc_info.value.code == 1
