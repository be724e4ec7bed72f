"""
Base class for domain API services.

Provides the uniform request shape every domain module follows: call the
transport, require a SUCCESS envelope with data, and hand back the data
exactly as received or raise the module's error with a fixed message.
"""

import logging
from typing import Any, Optional

from .client import ApiClient, get_api_client
from .exceptions import ApiResponseError
from .models import Envelope


logger = logging.getLogger(__name__)


class BaseApiService:
    """
    Base class for all domain services.

    Provides common functionality for backend calls:
    - API client access via self._api
    - Envelope unwrapping via self._unwrap()

    Subclasses set error_class to their module's ApiResponseError subclass
    and implement one method per backend operation.

    Example:
        class DashboardService(BaseApiService):
            error_class = DashboardApiError

            async def get_patient_dashboard(self) -> dict:
                envelope = await self._api.get(DashboardEndpoints.PATIENT)
                return self._unwrap(envelope, "Failed to get patient dashboard")
    """

    error_class: type[ApiResponseError] = ApiResponseError

    def __init__(self, api: Optional[ApiClient] = None) -> None:
        """
        Initialize the service with an API client.

        Args:
            api: Client to send requests through. Defaults to the
                 process-wide client bound to the default session.
        """
        self._api = api or get_api_client()

    def _unwrap(
        self,
        envelope: Envelope,
        error_message: str,
        allow_empty: bool = False,
        default: Any = None,
    ) -> Any:
        """
        Return the envelope's data or raise.

        Args:
            envelope: Parsed response envelope
            error_message: Fixed message for the raised error
            allow_empty: Treat a SUCCESS envelope without data as success
            default: Value returned in that case

        Raises:
            ApiResponseError: (the service's error_class) if status is not
                SUCCESS, or data is missing and allow_empty is False
        """
        if envelope.is_success and envelope.has_data:
            return envelope.data
        if envelope.is_success and allow_empty:
            return default

        logger.warning(
            f"{error_message} (status={envelope.status.value}, "
            f"server message={envelope.message!r})"
        )
        raise self.error_class(
            error_message,
            server_message=envelope.message,
            action=envelope.action,
        )
