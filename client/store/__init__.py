"""
Client-side state containers.

Each container holds the last-fetched snapshot of one area of the app and
exposes plain setters. There is no validation beyond the field types, no
derived data and no coordination between containers: last write wins.

- auth: login status, role, onboarding (role/onboarding persisted locally)
- user: the user's profile and preferences
- patient: the exercise session state machine and activity stats
- caregiver: watched patients and their locations
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from shared.storage import LocalStorage

from .auth import AuthState, AuthUser
from .caregiver import BeaconLocation, CaregiverState, Location, PatientStatus, WatchedPatient
from .patient import DailyStats, ExerciseSession, PatientState, SessionType
from .user import Language, NotificationSettings, SyncSettings, UserProfile, UserState


class Store(BaseModel):
    """All state containers of the app."""

    auth: AuthState = Field(default_factory=AuthState)
    user: UserState = Field(default_factory=UserState)
    patient: PatientState = Field(default_factory=PatientState)
    caregiver: CaregiverState = Field(default_factory=CaregiverState)

    def get_state(self) -> dict[str, Any]:
        """Plain-dict snapshot of every container."""
        return self.model_dump(mode="json")


def create_store(storage: Optional[LocalStorage] = None) -> Store:
    """Create a store, optionally wiring the auth container to local storage."""
    store = Store()
    if storage is not None:
        store.auth.attach_storage(storage)
    return store


__all__ = [
    "Store",
    "create_store",
    "AuthState",
    "AuthUser",
    "UserState",
    "UserProfile",
    "Language",
    "NotificationSettings",
    "SyncSettings",
    "PatientState",
    "ExerciseSession",
    "DailyStats",
    "SessionType",
    "CaregiverState",
    "WatchedPatient",
    "Location",
    "BeaconLocation",
    "PatientStatus",
]
