"""
User state container.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class Language(str, Enum):
    KO = "ko"
    EN = "en"


class NotificationSettings(BaseModel):
    exercise_reminder: bool = False
    reminder_time: str = ""


class SyncSettings(BaseModel):
    auto_sync: bool = False
    last_sync: str = ""


class UserProfile(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    avatar: Optional[str] = None
    language: Language = Language.KO
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    sync_settings: SyncSettings = Field(default_factory=SyncSettings)


class UserState(BaseModel):
    """User profile snapshot with its setters."""

    profile: Optional[UserProfile] = None
    is_loading: bool = False
    error: Optional[str] = None

    def set_profile(self, profile: UserProfile) -> None:
        self.profile = profile

    def update_profile(self, **fields: Any) -> None:
        """Shallow-merge fields into the profile. No-op without a profile."""
        if self.profile is not None:
            self.profile = self.profile.model_copy(update=fields)

    def update_notification_settings(self, settings: NotificationSettings) -> None:
        if self.profile is not None:
            self.profile.notifications = settings

    def update_sync_settings(self, settings: SyncSettings) -> None:
        if self.profile is not None:
            self.profile.sync_settings = settings

    def set_loading(self, is_loading: bool) -> None:
        self.is_loading = is_loading

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
