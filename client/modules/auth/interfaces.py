"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for OAuth login and session lifecycle operations.
    """

    async def get_oauth_url(self, provider: str) -> str:
        """
        Get the provider's login page URL.

        Args:
            provider: OAuth provider name, e.g. "kakao"

        Returns:
            The authUrl the user should be sent to

        Raises:
            AuthApiError: If the backend reports failure or omits authUrl
        """
        ...

    async def get_oauth_providers(self) -> list[str]:
        """
        List the OAuth providers the backend supports.

        Raises:
            AuthApiError: If the backend reports failure
        """
        ...

    async def process_oauth_callback(self, provider: str, code: str) -> str:
        """
        Exchange an authorization code for a bearer token.

        On success the token is stored in the session, so every following
        request is authenticated.

        Returns:
            The bearer token

        Raises:
            AuthApiError: If the backend reports failure or omits the token
        """
        ...

    def restore_auth_token(self, token: str) -> None:
        """Put a previously issued token back into the session."""
        ...

    def logout(self) -> None:
        """Drop the session token. Safe to call when already logged out."""
        ...

    def get_auth_token(self) -> Optional[str]:
        """Read the current session token."""
        ...
