from __future__ import annotations

from typing import List, Optional


class LinkupMCPError(Exception):
    """Base error for the Linkup MCP server."""


class ConfigValidationError(LinkupMCPError):
    """Startup configuration is missing or malformed.

    Carries every violation found, not only the first one.
    """

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__(" | ".join(self.errors))


class ProviderError(LinkupMCPError):
    """The outbound search call failed."""

    def __init__(self, message: str, *, provider: str = "linkup", query: Optional[str] = None) -> None:
        self.message = message
        self.provider = provider
        self.query = query
        super().__init__(message)
