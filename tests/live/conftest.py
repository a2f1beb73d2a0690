"""Skip guards for live tests.

Live tests talk to a real deployment of the API under test and are skipped
when its location is not configured. They never fail due to missing config.

Environment variables:
  TAF_BASE_URL     API root, e.g. https://jsonplaceholder.typicode.com
  TAF_API_TOKEN    Bearer token (optional)
  TAF_TIMEOUT      Request timeout in seconds (optional, default 10)

Run:
  export TAF_BASE_URL=https://jsonplaceholder.typicode.com
  pytest tests/live -v -m live
"""

from __future__ import annotations

import os

import pytest

from placeholder_taf.client import PlaceholderApi


skip_no_api = pytest.mark.skipif(
    not os.environ.get("TAF_BASE_URL"),
    reason="Set TAF_BASE_URL to run live API tests",
)


@pytest.fixture(scope="session")
def live_api() -> PlaceholderApi:
    if not os.environ.get("TAF_BASE_URL"):
        pytest.skip("TAF_BASE_URL not set")
    return PlaceholderApi.from_env()
