"""
Authentication module data models.
"""

from enum import Enum

from pydantic import Field

from shared.models import WireModel


class UserRole(str, Enum):
    """The two roles the app serves."""

    PATIENT = "patient"
    CAREGIVER = "caregiver"


class OAuthCallbackRequest(WireModel):
    """Body of the OAuth callback exchange."""

    provider: str = Field(..., min_length=1, description="OAuth provider, e.g. 'kakao'")
    code: str = Field(..., min_length=1, description="Authorization code from the provider")
