from __future__ import annotations

from .config import DEFAULT_BASE_URL, LinkupConfig, resolve_config
from .providers import SearchClient, SearchRequest, build_client, search

__all__ = [
    "DEFAULT_BASE_URL",
    "LinkupConfig",
    "SearchClient",
    "SearchRequest",
    "build_client",
    "resolve_config",
    "search",
]
