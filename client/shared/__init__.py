"""
Shared infrastructure for the WalkMate client.

This package contains cross-cutting concerns that are used by every domain
module:
- config: Centralized settings management
- client: HTTP transport and response envelope parsing
- endpoints: Endpoint table and path/query builders
- session: Bearer token state
- storage: Local device key/value storage
- exceptions: Base exception classes

Note: Endpoint-specific logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .client import ApiClient, get_api_client, reset_api_client
from .endpoints import interpolate, with_query
from .exceptions import (
    WalkMateError,
    ValidationError,
    TransportError,
    HTTPStatusError,
    InvalidResponseError,
    ApiResponseError,
    TrackingError,
)
from .models import Envelope, EnvelopeStatus, QueryModel, WireModel
from .service import BaseApiService
from .session import (
    Credentials,
    Session,
    get_session,
    reset_session,
    set_auth_token,
    get_auth_token,
)
from .storage import LocalStorage, USER_ROLE_KEY, ONBOARDING_COMPLETED_KEY

__all__ = [
    "Settings",
    "get_settings",
    "ApiClient",
    "get_api_client",
    "reset_api_client",
    "interpolate",
    "with_query",
    "WalkMateError",
    "ValidationError",
    "TransportError",
    "HTTPStatusError",
    "InvalidResponseError",
    "ApiResponseError",
    "TrackingError",
    "Envelope",
    "EnvelopeStatus",
    "WireModel",
    "QueryModel",
    "BaseApiService",
    "Credentials",
    "Session",
    "get_session",
    "reset_session",
    "set_auth_token",
    "get_auth_token",
    "LocalStorage",
    "USER_ROLE_KEY",
    "ONBOARDING_COMPLETED_KEY",
]
