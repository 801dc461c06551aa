"""Command-line entry point for the Linkup MCP server.

Usage:
    # stdio, for MCP hosts that spawn the server as a subprocess
    linkup-mcp --api-key=$LINKUP_API_KEY

    # JSON-RPC over HTTP (POST /rpc, GET /health)
    linkup-mcp --transport http --port 8000

Exit status is 0 on --help or clean shutdown, 1 on any startup failure.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Mapping, NoReturn, Optional, Sequence

import uvicorn

from linkup_mcp import SERVER_NAME, SERVER_VERSION
from linkup_mcp._common.stdio import build_stdio_server, run_stdio
from linkup_mcp.exceptions import ConfigValidationError, LinkupMCPError
from linkup_mcp.web_search.config import API_KEY_ENV, BASE_URL_ENV, DEFAULT_BASE_URL, resolve_config
from linkup_mcp.web_search.providers import build_client
from linkup_mcp.web_search_server import build_app, build_tools

logger = logging.getLogger("linkup_mcp.cli")

ACCEPTED_ARGS = ["api-key", "base-url", "transport", "host", "port"]


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigValidationError([message])


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="linkup-mcp",
        description="Expose Linkup web search as an MCP tool.",
    )
    parser.add_argument(
        "--api-key",
        dest="api_key",
        help=f"Your Linkup API key (required unless {API_KEY_ENV} is set)",
    )
    parser.add_argument(
        "--base-url",
        dest="base_url",
        help=f"Custom API base URL (default: {BASE_URL_ENV} or {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Protocol transport (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="HTTP bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (default: 8000)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {SERVER_VERSION}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    options, extras = build_parser().parse_known_args(argv)
    if extras:
        key = extras[0].lstrip("-").split("=", 1)[0]
        raise ConfigValidationError(
            [f"Invalid argument: {key}. Accepted arguments are: {', '.join(ACCEPTED_ARGS)}"]
        )
    return options


def _configure_logging(environ: Mapping[str, str]) -> None:
    level = (environ.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    environ = os.environ if environ is None else environ
    _configure_logging(environ)

    try:
        options = parse_args(argv)
        config = resolve_config({"api_key": options.api_key, "base_url": options.base_url}, environ)
    except LinkupMCPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("Starting %s %s (base_url=%s)", SERVER_NAME, SERVER_VERSION, config.base_url)

    try:
        client = build_client(config)
        if options.transport == "http":
            uvicorn.run(build_app(client), host=options.host, port=options.port)
        else:
            server = build_stdio_server(server_name=SERVER_NAME, tools=build_tools(client))
            asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Fatal error in main()")
        return 1

    return 0
