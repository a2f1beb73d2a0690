"""Shared pytest fixtures and test markers.

Test tiers
----------
  unit        Fast, fully offline. HTTP is mocked with requests_mock or a
              MagicMock session.

  integration Full create/read/update/list flows against the in-memory
              FakeResourceServer (tests/fixtures/fake_server.py).

  quality     Property-based tests (Hypothesis) for record round-trips,
              path templating and the CRUD laws.

  live        Real API calls. Skipped unless TAF_BASE_URL is set.
              See tests/live/conftest.py.

Run specific tiers:
  pytest tests/unit tests/integration tests/quality   # offline only
  pytest tests/live -m live                           # live only
  pytest tests/ -v                                    # everything
"""

from __future__ import annotations

import pytest
import requests_mock as req_mock

from placeholder_taf.endpoints.comment_endpoint import CommentEndpoint
from placeholder_taf.endpoints.user_endpoint import UserEndpoint
from placeholder_taf.models import Comment, User
from placeholder_taf.transport.transport import ApiTransport
from tests.fixtures.fake_server import FakeResourceServer

BASE_URL = "https://api.example.test"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: fake-server CRUD flows")
    config.addinivalue_line("markers", "quality: property-based (Hypothesis)")
    config.addinivalue_line("markers", "live: requires TAF_BASE_URL (skipped by default)")


# ---------------------------------------------------------------------------
# Transport / endpoint fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def transport() -> ApiTransport:
    return ApiTransport(BASE_URL)


@pytest.fixture
def comments(transport: ApiTransport) -> CommentEndpoint:
    return CommentEndpoint(transport)


@pytest.fixture
def users(transport: ApiTransport) -> UserEndpoint:
    return UserEndpoint(transport)


@pytest.fixture
def http():
    """requests_mock.Mocker active for the duration of the test."""
    with req_mock.Mocker() as m:
        yield m


@pytest.fixture
def fake_server(http: req_mock.Mocker) -> FakeResourceServer:
    """Fake API serving /comments (integer IDs) and /users (string IDs)."""
    server = FakeResourceServer(http, BASE_URL)
    server.add_resource("comments")
    server.add_resource("users", id_factory=lambda n: f"u-{n}")
    return server


# ---------------------------------------------------------------------------
# Record fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def new_comment() -> Comment:
    return Comment(name="Jane", email="jane@example.com", body="nice post")


@pytest.fixture
def comment_json() -> dict:
    return {
        "postId": 1,
        "id": 1,
        "name": "id labore ex et quam laborum",
        "email": "Eliseo@gardner.biz",
        "body": "laudantium enim quasi est quidem magnam voluptate",
    }


@pytest.fixture
def new_user() -> User:
    return User(name="Leanne Graham", username="Bret", email="Sincere@april.biz")


@pytest.fixture
def user_json() -> dict:
    """A user as JSONPlaceholder returns it, nested fields included."""
    return {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {"name": "Romaguera-Crona", "catchPhrase": "Multi-layered", "bs": "e-markets"},
    }
