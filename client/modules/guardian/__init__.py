"""
Guardian module.

Caregiver-facing operations: patient linking, dashboard, patient detail,
notifications and alert acknowledgement.

Public API:
- IGuardianService: Interface for guardian operations
- GuardianService: Implementation
- LinkPatientRequest, NotificationType: Models
- GuardianApiError: Raised when a guardian endpoint fails
"""

from .interfaces import IGuardianService
from .models import LinkPatientRequest, NotificationType
from .exceptions import GuardianApiError
from .service import GuardianService, get_guardian_service, reset_guardian_service

__all__ = [
    "IGuardianService",
    "GuardianService",
    "get_guardian_service",
    "reset_guardian_service",
    "LinkPatientRequest",
    "NotificationType",
    "GuardianApiError",
]
