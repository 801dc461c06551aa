"""Linkup Web Search MCP server.

Provides one tool:
  - search-web  — search the web through Linkup and return the raw results

The tool name is part of the wire contract; renaming it breaks every caller.
"""

from __future__ import annotations

import json
import logging
from functools import partial
from typing import List

from fastapi import FastAPI

from linkup_mcp import SERVER_NAME
from linkup_mcp._common.server import Json, ToolDef, create_mcp_app, text_content
from linkup_mcp.web_search.providers import SearchClient, SearchRequest, search

logger = logging.getLogger("linkup_mcp.web_search_server")

TOOL_NAME = "search-web"

TOOL_DESCRIPTION = """\
A team member that will search the internet to answer your question. Ask it all your questions that require browsing the web.
Note that this agent is using a powerful language model and it can do the search and analyse the results.
Ask your question in a way that lets the language model perform at its best: provide as much context as possible and ask clearly.
Give as much context as possible, in particular if you need to search on a specific timeframe!
Don't hesitate to hand it a complex search task, like finding the difference between two webpages.
Your request must be a real sentence, not a google search! Like "Find me this information (...)" rather than a few keywords.

Choose the depth carefully:
- "standard" is the default. It is fast and cheap, and fits questions with a direct answer.
- "deep" is slower and more expensive. Use it only for multi-hop, ambiguous or jargon-heavy questions."""


async def tool_search_web(client: SearchClient, args: SearchRequest) -> Json:
    """Search the web with Linkup and relay the provider's results verbatim."""
    results = await search(client, args)
    return text_content(json.dumps(results))


def build_tools(client: SearchClient) -> List[ToolDef]:
    return [
        ToolDef(
            name=TOOL_NAME,
            description=TOOL_DESCRIPTION,
            request_model=SearchRequest,
            handler=partial(tool_search_web, client),
        ),
    ]


def build_app(client: SearchClient) -> FastAPI:
    return create_mcp_app(server_name=SERVER_NAME, tools=build_tools(client))
