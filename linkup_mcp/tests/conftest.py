"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


SAMPLE_RESULTS: List[Dict[str, Any]] = [
    {
        "type": "text",
        "name": "Paris - Wikipedia",
        "url": "https://en.wikipedia.org/wiki/Paris",
        "content": "Paris is the capital and largest city of France.",
    }
]


class FakeLinkupClient:
    """Records every search and fails the first `fail_times` calls."""

    def __init__(self, results: Optional[Any] = None, fail_times: int = 0) -> None:
        self.results = SAMPLE_RESULTS if results is None else results
        self.fail_times = fail_times
        self.calls: List[Dict[str, Any]] = []

    async def async_search(self, *, query: str, depth: str, output_type: str) -> Any:
        self.calls.append({"query": query, "depth": depth, "output_type": output_type})
        if self.fail_times > 0:
            self.fail_times -= 1
            raise RuntimeError("Linkup API returned 429: rate limited")
        return SimpleNamespace(results=self.results)


@pytest.fixture
def fake_client() -> FakeLinkupClient:
    return FakeLinkupClient()


@pytest.fixture
def flaky_client() -> FakeLinkupClient:
    return FakeLinkupClient(fail_times=1)
