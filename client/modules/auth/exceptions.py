"""
Authentication module exceptions.
"""

from typing import Optional

from shared.exceptions import ApiResponseError


class AuthApiError(ApiResponseError):
    """Raised when an OAuth endpoint reports failure or returns no data."""

    def __init__(
        self,
        message: str,
        server_message: Optional[str] = None,
        action: Optional[str] = None,
    ):
        super().__init__(message, server_message, action, code="AUTH_API_ERROR")
