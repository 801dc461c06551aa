"""Linkup web search exposed as a single MCP tool."""

from __future__ import annotations

SERVER_NAME = "linkup-mcp"
SERVER_VERSION = "1.0.0"

__version__ = SERVER_VERSION
