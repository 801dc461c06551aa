from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from linkup_mcp import SERVER_VERSION


Json = Dict[str, Any]

PROTOCOL_VERSION = "2025-03-26"

logger = logging.getLogger("linkup_mcp.server")


@dataclass
class ToolDef:
    name: str
    description: str
    request_model: Type[BaseModel]
    handler: Callable[[Any], Awaitable[Json]]

    @property
    def input_schema(self) -> Json:
        return self.request_model.model_json_schema()

    # Convenience alias to match common MCP vocabulary
    @property
    def inputSchema(self) -> Json:  # noqa: N802
        return self.input_schema

    def parse_arguments(self, arguments: Optional[Json]) -> BaseModel:
        """Build the typed request; raises pydantic.ValidationError on schema violations."""
        return self.request_model.model_validate(arguments or {})


def text_content(text: str) -> Json:
    return {"content": [{"type": "text", "text": text}]}


def create_mcp_app(
    *,
    server_name: str,
    tools: List[ToolDef],
    version: str = PROTOCOL_VERSION,
) -> FastAPI:
    """Create a minimal MCP JSON-RPC server over HTTP.

    * Tools are discoverable via `tools/list`
    * Tools are invokable via `tools/call`
    * Arguments are validated against the tool's request model before the
      handler runs; a handler never sees malformed input.
    """

    tool_map: Dict[str, ToolDef] = {t.name: t for t in tools}

    app = FastAPI(title=server_name)

    @app.get("/health")
    async def health() -> Json:
        return {"ok": True, "name": server_name, "ts": int(time.time())}

    @app.post("/rpc")
    async def rpc(request: Request) -> JSONResponse:
        body = await request.json()
        jsonrpc = body.get("jsonrpc")
        method = body.get("method")
        params = body.get("params") or {}
        req_id = body.get("id")

        def err(code: int, message: str, data: Optional[Json] = None) -> JSONResponse:
            return JSONResponse(
                {
                    "jsonrpc": "2.0",
                    "id": req_id,
                    "error": {"code": code, "message": message, "data": data or {}},
                }
            )

        if jsonrpc != "2.0":
            return err(-32600, "Invalid JSON-RPC")

        if method in ("initialize", "mcp/initialize"):
            return JSONResponse(
                {
                    "jsonrpc": "2.0",
                    "id": req_id,
                    "result": {
                        "protocolVersion": version,
                        "serverInfo": {"name": server_name, "version": SERVER_VERSION},
                        "capabilities": {"tools": {"listChanged": False}},
                    },
                }
            )

        if method in ("tools/list", "mcp/tools/list"):
            return JSONResponse(
                {
                    "jsonrpc": "2.0",
                    "id": req_id,
                    "result": {
                        "tools": [
                            {
                                "name": t.name,
                                "description": t.description,
                                "inputSchema": t.inputSchema,
                            }
                            for t in tools
                        ]
                    },
                }
            )

        if method in ("tools/call", "mcp/tools/call"):
            name = params.get("name")
            if not name:
                return err(-32602, "Missing params.name")
            tool = tool_map.get(name)
            if not tool:
                return err(-32601, f"Unknown tool: {name}")
            try:
                args = tool.parse_arguments(params.get("arguments"))
            except ValidationError as exc:
                return err(
                    -32602,
                    "Invalid params",
                    {"tool": name, "errors": exc.errors(include_url=False, include_context=False)},
                )
            try:
                result = await tool.handler(args)
                return JSONResponse({"jsonrpc": "2.0", "id": req_id, "result": result})
            except Exception as exc:
                logger.warning("Tool %s failed: %s", name, exc)
                return err(-32000, "Tool execution failed", {"tool": name, "error": str(exc)})

        return err(-32601, f"Method not found: {method}")

    return app
