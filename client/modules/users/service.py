"""
User service implementation.

Account info, patient profile management, guardian link codes and account
deletion.
"""

from typing import Any, Optional, Union

from shared.endpoints import UserEndpoints
from shared.service import BaseApiService

from .exceptions import UserApiError
from .interfaces import IUserService
from .models import PatientProfile, UpdatePatientInfoRequest, UpdateUserInfoRequest


class UserService(BaseApiService, IUserService):
    """Implementation of the user service."""

    error_class = UserApiError

    async def get_user_info(self) -> dict[str, Any]:
        envelope = await self._api.get(UserEndpoints.INFO)
        return self._unwrap(envelope, "Failed to get user info")

    async def get_user_profile_status(self) -> dict[str, Any]:
        envelope = await self._api.get(UserEndpoints.PROFILE_STATUS)
        return self._unwrap(envelope, "Failed to get user profile status")

    async def set_patient_profile(
        self, profile: Union[PatientProfile, dict[str, Any]]
    ) -> Any:
        envelope = await self._api.post(
            UserEndpoints.PATIENT_PROFILE, PatientProfile.wire_body(profile)
        )
        return self._unwrap(envelope, "Failed to set patient profile")

    async def update_user_info(
        self, update: Union[UpdateUserInfoRequest, dict[str, Any]]
    ) -> Any:
        envelope = await self._api.put(
            UserEndpoints.INFO, UpdateUserInfoRequest.wire_body(update)
        )
        return self._unwrap(envelope, "Failed to update user info")

    async def update_patient_info(
        self, update: Union[UpdatePatientInfoRequest, dict[str, Any]]
    ) -> Any:
        envelope = await self._api.put(
            UserEndpoints.PATIENT_INFO, UpdatePatientInfoRequest.wire_body(update)
        )
        return self._unwrap(envelope, "Failed to update patient info")

    async def generate_patient_link_code(self) -> dict[str, Any]:
        envelope = await self._api.post(UserEndpoints.PATIENT_LINK_CODE)
        return self._unwrap(envelope, "Failed to generate patient link code")

    async def delete_user(self) -> Any:
        envelope = await self._api.delete(UserEndpoints.DELETE)
        return self._unwrap(envelope, "Failed to delete user")


# Module-level instance getter
_service_instance: Optional[UserService] = None


def get_user_service() -> UserService:
    """Get the user service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = UserService()
    return _service_instance


def reset_user_service() -> None:
    """Reset the user service singleton (for testing)."""
    global _service_instance
    _service_instance = None
