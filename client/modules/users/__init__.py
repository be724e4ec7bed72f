"""
User module.

Account info, patient profiles, guardian link codes and account deletion.

Public API:
- IUserService: Interface for user operations
- UserService: Implementation
- PatientProfile, UpdateUserInfoRequest, UpdatePatientInfoRequest: Request models
- UserApiError: Raised when a user endpoint fails
"""

from .interfaces import IUserService
from .models import PatientProfile, UpdateUserInfoRequest, UpdatePatientInfoRequest
from .exceptions import UserApiError
from .service import UserService, get_user_service, reset_user_service

__all__ = [
    "IUserService",
    "UserService",
    "get_user_service",
    "reset_user_service",
    "PatientProfile",
    "UpdateUserInfoRequest",
    "UpdatePatientInfoRequest",
    "UserApiError",
]
