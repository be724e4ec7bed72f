"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
JWT factories, a fake backend served through httpx.MockTransport, and
singleton resets so no test sees another test's session or client.
"""

import json
import pytest
from datetime import datetime, timezone, timedelta
from typing import Any, Callable, Optional, Union

import httpx
import jwt  # PyJWT
import pytest_asyncio

from modules.auth.service import reset_auth_service
from modules.dashboard.service import reset_dashboard_service
from modules.exercise.service import reset_exercise_service
from modules.guardian.service import reset_guardian_service
from modules.health.service import reset_health_service
from modules.users.service import reset_user_service
from shared.client import ApiClient, reset_api_client
from shared.config import get_settings
from shared.session import Session, reset_session


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_BASE_URL = "https://api.test.walkmate"


def create_test_token(
    user_id: str = "test-user-123",
    role: str = "patient",
    expired: bool = False,
) -> str:
    """
    Create a test JWT token as the backend would issue it.

    Args:
        user_id: User ID to include in the token
        role: User role claim
        expired: If True, creates an expired token

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "role": role,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def create_raw_token(claims: dict[str, Any]) -> str:
    """
    Sign arbitrary claims without PyJWT's claim handling.

    Lets tests build tokens the backend should never issue, like a
    non-numeric exp.
    """
    payload = json.dumps(claims).encode("utf-8")
    return jwt.api_jws.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def envelope(
    data: Any = None,
    status: str = "SUCCESS",
    message: Optional[str] = None,
    action: Optional[str] = None,
) -> dict[str, Any]:
    """Build a response envelope body."""
    return {"status": status, "data": data, "message": message, "action": action}


Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class MockBackend:
    """
    In-memory stand-in for the WalkMate backend.

    Routes are keyed by (method, path) with the query string ignored.
    Every request is recorded; unrouted requests get a 404.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Reply] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._routes.get((request.method, request.url.path))
        if reply is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(reply):
            return reply(request)
        return reply

    def route(self, method: str, path: str, reply: Reply) -> None:
        self._routes[(method.upper(), path)] = reply

    def reply(self, method: str, path: str, data: Any = None, **fields: Any) -> None:
        """Answer method + path with an envelope."""
        self.route(method, path, httpx.Response(200, json=envelope(data, **fields)))

    def fail(self, method: str, path: str, message: str = "server says no") -> None:
        """Answer method + path with an ERROR envelope."""
        self.reply(method, path, status="ERROR", message=message)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decoded JSON body of the last request."""
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset every module singleton before and after each test."""

    def reset():
        reset_api_client()
        reset_session()
        reset_auth_service()
        reset_user_service()
        reset_dashboard_service()
        reset_exercise_service()
        reset_health_service()
        reset_guardian_service()
        get_settings.cache_clear()

    reset()
    yield
    reset()


@pytest.fixture
def backend() -> MockBackend:
    """A fresh fake backend."""
    return MockBackend()


@pytest.fixture
def session() -> Session:
    """A logged-out session."""
    return Session()


@pytest_asyncio.fixture
async def api(backend: MockBackend, session: Session):
    """An API client wired to the fake backend."""
    client = ApiClient(
        base_url=TEST_BASE_URL,
        session=session,
        transport=httpx.MockTransport(backend.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()
