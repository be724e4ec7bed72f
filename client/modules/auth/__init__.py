"""
Authentication module.

Handles OAuth login against the backend and the bearer token lifecycle.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Implementation bound to an API client and session
- UserRole, OAuthCallbackRequest: Models
- AuthApiError: Raised when an OAuth endpoint fails
"""

from .interfaces import IAuthService
from .models import UserRole, OAuthCallbackRequest
from .exceptions import AuthApiError
from .service import AuthService, get_auth_service, reset_auth_service

__all__ = [
    # Interface
    "IAuthService",
    # Implementation
    "AuthService",
    "get_auth_service",
    "reset_auth_service",
    # Models
    "UserRole",
    "OAuthCallbackRequest",
    # Exceptions
    "AuthApiError",
]
