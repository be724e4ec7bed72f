"""
User module data models.

Request bodies for profile management. Responses are returned as the
backend sends them.
"""

from typing import Optional
from pydantic import Field

from shared.models import WireModel


class PatientProfile(WireModel):
    """Initial patient profile set during onboarding."""

    age: int = Field(..., ge=0, le=150, description="Age in years")
    disease: str = Field(..., description="Condition being rehabilitated")
    phone_number: str = Field(..., description="Patient phone number")
    emergency_contact: str = Field(..., description="Emergency contact number")


class UpdateUserInfoRequest(WireModel):
    """Partial update of the basic user info. Unset fields are not sent."""

    nickname: Optional[str] = None
    profile_image: Optional[str] = None


class UpdatePatientInfoRequest(WireModel):
    """Partial update of the patient profile. Unset fields are not sent."""

    age: Optional[int] = Field(None, ge=0, le=150)
    disease: Optional[str] = None
    phone_number: Optional[str] = None
    emergency_contact: Optional[str] = None
