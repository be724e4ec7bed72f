"""
Guardian module data models.
"""

from enum import Enum
from pydantic import Field

from shared.models import WireModel


class NotificationType(str, Enum):
    """Severity of a guardian notification."""

    URGENT = "urgent"
    WARNING = "warning"
    INFO = "info"


class LinkPatientRequest(WireModel):
    """Link the signed-in guardian to a patient by the patient's code."""

    patient_link_code: str = Field(..., min_length=1, description="Code generated by the patient")
