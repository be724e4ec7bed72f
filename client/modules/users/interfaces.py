"""
User module interface.
"""

from typing import Any, Protocol, Union, runtime_checkable

from .models import PatientProfile, UpdatePatientInfoRequest, UpdateUserInfoRequest


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for account and profile operations.

    All methods raise UserApiError when the backend reports failure.
    """

    async def get_user_info(self) -> dict[str, Any]:
        """Get the signed-in user (uid, username, nickname, email, profileImage)."""
        ...

    async def get_user_profile_status(self) -> dict[str, Any]:
        """Get which role profiles are complete, with the profiles themselves."""
        ...

    async def set_patient_profile(
        self, profile: Union[PatientProfile, dict[str, Any]]
    ) -> Any:
        """Create the patient profile. Returns the backend's confirmation."""
        ...

    async def update_user_info(
        self, update: Union[UpdateUserInfoRequest, dict[str, Any]]
    ) -> Any:
        """Update nickname and/or profile image."""
        ...

    async def update_patient_info(
        self, update: Union[UpdatePatientInfoRequest, dict[str, Any]]
    ) -> Any:
        """Update any subset of the patient profile."""
        ...

    async def generate_patient_link_code(self) -> dict[str, Any]:
        """Generate a code a guardian can use to link to this patient."""
        ...

    async def delete_user(self) -> Any:
        """Delete the signed-in account."""
        ...
