"""
Health module.

Pain records, entered manually or after an exercise, and pain history.

Public API:
- IHealthService: Interface for health operations
- HealthService: Implementation
- PainRecord, PainHistoryParams, PainRecordType: Models
- HealthApiError: Raised when a health endpoint fails
"""

from .interfaces import IHealthService
from .models import PainRecord, PainHistoryParams, PainRecordType
from .exceptions import HealthApiError
from .service import (
    HealthService,
    get_health_service,
    reset_health_service,
    PAIN_RECORD_SAVED_MESSAGE,
)

__all__ = [
    "IHealthService",
    "HealthService",
    "get_health_service",
    "reset_health_service",
    "PAIN_RECORD_SAVED_MESSAGE",
    "PainRecord",
    "PainHistoryParams",
    "PainRecordType",
    "HealthApiError",
]
