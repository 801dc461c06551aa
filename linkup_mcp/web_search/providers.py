"""Linkup search provider for the Web Search MCP server.

The provider's response is treated as opaque: only its ``results`` field is
read, converted to JSON-compatible data and handed back untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Mapping, Protocol

from linkup import LinkupClient
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python

from linkup_mcp.exceptions import ProviderError

from .config import LinkupConfig

logger = logging.getLogger("linkup_mcp.web_search.providers")

OUTPUT_TYPE = "searchResults"

Depth = Literal["standard", "deep"]


# ── Request type ─────────────────────────────────────────────────────────────

class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str = Field(
        ...,
        min_length=1,
        description=(
            "The question to search for, written as a full natural-language "
            "sentence with as much context as possible, not a list of keywords."
        ),
    )
    depth: Depth = Field(
        ...,
        description=(
            "Search depth. 'standard' is fast and cheap, use it for direct "
            "questions. 'deep' is more thorough and more expensive, use it only "
            "for multi-hop, ambiguous or jargon-heavy questions."
        ),
    )


# ── Client ───────────────────────────────────────────────────────────────────

class SearchClient(Protocol):
    async def async_search(self, *, query: str, depth: Depth, output_type: str) -> Any: ...


def build_client(config: LinkupConfig) -> LinkupClient:
    return LinkupClient(api_key=config.api_key, base_url=config.base_url)


def _results_of(response: Any) -> Any:
    if isinstance(response, Mapping):
        return response["results"]
    return response.results


async def search(client: SearchClient, request: SearchRequest) -> Any:
    """Run one search and return the provider's ``results`` as JSON-ready data."""
    logger.debug("linkup search depth=%s query_chars=%d", request.depth, len(request.query))
    try:
        response = await client.async_search(
            query=request.query,
            depth=request.depth,
            output_type=OUTPUT_TYPE,
        )
        results = _results_of(response)
    except Exception as exc:
        logger.warning("Linkup search failed: %s", exc)
        raise ProviderError(str(exc) or type(exc).__name__, query=request.query) from exc

    return to_jsonable_python(results)
