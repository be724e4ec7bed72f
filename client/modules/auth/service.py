"""
Authentication service implementation.

OAuth login against the WalkMate backend and the client-side token
lifecycle. Logout is purely local: the backend has no logout endpoint.
"""

import logging
from typing import TYPE_CHECKING, Optional

from shared.client import ApiClient
from shared.endpoints import AuthEndpoints, interpolate
from shared.service import BaseApiService
from shared.session import Session

from .exceptions import AuthApiError
from .interfaces import IAuthService
from .models import OAuthCallbackRequest

if TYPE_CHECKING:
    from store.auth import AuthState


logger = logging.getLogger(__name__)

KAKAO_PROVIDER = "kakao"


class AuthService(BaseApiService, IAuthService):
    """
    Implementation of the authentication service.

    The session defaults to the one the API client sends requests with,
    so a token stored here is the token the next request carries.
    """

    error_class = AuthApiError

    def __init__(
        self,
        api: Optional[ApiClient] = None,
        session: Optional[Session] = None,
    ):
        super().__init__(api)
        self._session = session or self._api.session

    async def get_oauth_url(self, provider: str) -> str:
        envelope = await self._api.get(
            interpolate(AuthEndpoints.OAUTH_URL, provider=provider)
        )
        message = f"Failed to get {provider} auth URL"
        data = self._unwrap(envelope, message)
        if not isinstance(data, dict) or not data.get("authUrl"):
            raise AuthApiError(message, envelope.message, envelope.action)
        return data["authUrl"]

    async def get_kakao_auth_url(self) -> str:
        """Shorthand for the Kakao login URL."""
        return await self.get_oauth_url(KAKAO_PROVIDER)

    async def get_oauth_providers(self) -> list[str]:
        envelope = await self._api.get(AuthEndpoints.OAUTH_PROVIDERS)
        message = "Failed to get OAuth providers"
        data = self._unwrap(envelope, message)
        if not isinstance(data, dict) or not isinstance(data.get("providers"), list):
            raise AuthApiError(message, envelope.message, envelope.action)
        return data["providers"]

    async def process_oauth_callback(self, provider: str, code: str) -> str:
        body = OAuthCallbackRequest(provider=provider, code=code)
        envelope = await self._api.post(AuthEndpoints.OAUTH_CALLBACK, body.to_wire())
        message = "Failed to process OAuth callback"
        data = self._unwrap(envelope, message)
        if not isinstance(data, dict) or not data.get("token"):
            raise AuthApiError(message, envelope.message, envelope.action)

        token = data["token"]
        self._session.set_token(token)
        logger.info(f"Logged in via {provider}")
        return token

    def restore_auth_token(self, token: str) -> None:
        self._session.set_token(token)
        if self._session.is_expired():
            # Still restored: the backend decides whether it is accepted
            logger.warning("Restored auth token has already expired")

    def logout(self) -> None:
        self._session.clear()

    def get_auth_token(self) -> Optional[str]:
        return self._session.get_token()

    def perform_logout(self, auth_state: Optional["AuthState"] = None) -> None:
        """
        Full sign-out: drop the token and reset the auth state container.

        When the container is attached to local storage, this also removes
        the persisted userRole and onboardingCompleted keys.
        """
        self.logout()
        if auth_state is not None:
            auth_state.logout()
        logger.info("Logged out")


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
