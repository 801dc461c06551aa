"""Web Search MCP — configuration from command-line flags and environment.

Each field is resolved from an ordered list of sources, first present value
wins:

  api_key   --api-key   -> LINKUP_API_KEY      -> (required)
  base_url  --base-url  -> LINKUP_API_BASE_URL -> https://api.linkup.so/v1
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from linkup_mcp.exceptions import ConfigValidationError


API_KEY_ENV = "LINKUP_API_KEY"
BASE_URL_ENV = "LINKUP_API_BASE_URL"
DEFAULT_BASE_URL = "https://api.linkup.so/v1"

MISSING_API_KEY = (
    "Linkup API key not provided. Please either pass it as an argument "
    f"--api-key=$KEY or set the {API_KEY_ENV} environment variable."
)

_HTTP_URL = TypeAdapter(AnyHttpUrl)


@dataclass(frozen=True)
class LinkupConfig:
    api_key: str
    base_url: str

    def __repr__(self) -> str:
        return f"LinkupConfig(api_key='***', base_url={self.base_url!r})"


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _first(*values: Optional[str]) -> Optional[str]:
    for value in values:
        value = _present(value)
        if value is not None:
            return value
    return None


def _is_http_url(value: str) -> bool:
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        return False
    return True


def resolve_config(flags: Mapping[str, Optional[str]], environ: Mapping[str, str]) -> LinkupConfig:
    """Merge explicit flags with an environment snapshot and validate.

    Raises ConfigValidationError listing every violated rule, in field order.
    """
    api_key = _first(flags.get("api_key"), environ.get(API_KEY_ENV))
    base_url = _first(flags.get("base_url"), environ.get(BASE_URL_ENV)) or DEFAULT_BASE_URL

    errors: List[str] = []
    if api_key is None:
        errors.append(MISSING_API_KEY)
    if not _is_http_url(base_url):
        errors.append(f"Base URL must be an absolute http(s) URL, got {base_url!r}.")

    if errors:
        raise ConfigValidationError(errors)

    return LinkupConfig(api_key=api_key, base_url=base_url)  # type: ignore[arg-type]
