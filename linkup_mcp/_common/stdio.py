"""Bind a static ToolDef table to the MCP Python SDK over stdio.

stdout carries the protocol; anything diagnostic goes to stderr through
logging.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from linkup_mcp import SERVER_VERSION

from .server import ToolDef

logger = logging.getLogger("linkup_mcp.stdio")


def build_stdio_server(*, server_name: str, tools: List[ToolDef]) -> Server:
    tool_map: Dict[str, ToolDef] = {t.name: t for t in tools}
    server: Server = Server(server_name, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=t.name, description=t.description, inputSchema=t.input_schema)
            for t in tools
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        # Raising here is reported by the SDK as an error result; the session stays up.
        tool = tool_map.get(name)
        if tool is None:
            raise ValueError(f"Unknown tool: {name}")
        args = tool.parse_arguments(arguments)
        envelope = await tool.handler(args)
        return [types.TextContent(type="text", text=block["text"]) for block in envelope["content"]]

    return server


async def run_stdio(server: Server) -> None:
    logger.info("Serving %s over stdio", server.name)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
