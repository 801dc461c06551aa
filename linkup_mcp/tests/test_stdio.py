"""Tests for the search-web tool bound to the MCP SDK server."""

from __future__ import annotations

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from linkup_mcp._common.stdio import build_stdio_server
from linkup_mcp.web_search_server import TOOL_NAME, build_tools


def _server(client):
    return build_stdio_server(server_name="linkup-mcp", tools=build_tools(client))


@pytest.mark.asyncio
async def test_list_tools(fake_client):
    async with create_connected_server_and_client_session(_server(fake_client)) as session:
        listed = await session.list_tools()
    assert [t.name for t in listed.tools] == [TOOL_NAME]
    assert listed.tools[0].inputSchema["properties"]["depth"]["enum"] == ["standard", "deep"]


@pytest.mark.asyncio
async def test_call_tool_returns_single_text_block(fake_client):
    async with create_connected_server_and_client_session(_server(fake_client)) as session:
        result = await session.call_tool(
            TOOL_NAME, {"query": "What is the capital of France?", "depth": "standard"}
        )
    assert not result.isError
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert json.loads(result.content[0].text) == fake_client.results
    assert len(fake_client.calls) == 1
    assert fake_client.calls[0]["output_type"] == "searchResults"


@pytest.mark.asyncio
async def test_invalid_depth_never_reaches_provider(fake_client):
    async with create_connected_server_and_client_session(_server(fake_client)) as session:
        result = await session.call_tool(TOOL_NAME, {"query": "What is the capital of France?", "depth": "quick"})
    assert result.isError
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_provider_failure_keeps_session_alive(flaky_client):
    args = {"query": "What is the capital of France?", "depth": "standard"}
    async with create_connected_server_and_client_session(_server(flaky_client)) as session:
        failed = await session.call_tool(TOOL_NAME, args)
        ok = await session.call_tool(TOOL_NAME, args)

    assert failed.isError
    assert "rate limited" in failed.content[0].text
    assert not ok.isError
    assert json.loads(ok.content[0].text) == flaky_client.results
