"""
Auth state container.

Login status, the chosen role and onboarding progress. The role and the
onboarding flag survive restarts through local storage.
"""

import logging
from typing import Optional
from pydantic import BaseModel, Field, PrivateAttr

from modules.auth.models import UserRole
from shared.exceptions import ValidationError
from shared.storage import LocalStorage, ONBOARDING_COMPLETED_KEY, USER_ROLE_KEY


logger = logging.getLogger(__name__)


class AuthUser(BaseModel):
    """The signed-in user as the login flow sees it."""

    id: str
    email: str
    name: str
    role: UserRole


class AuthState(BaseModel):
    """Auth state with its setters. Last write wins."""

    is_authenticated: bool = False
    user_role: Optional[UserRole] = None
    onboarding_completed: bool = False
    user: Optional[AuthUser] = None
    is_loading: bool = False
    error: Optional[str] = None

    _storage: Optional[LocalStorage] = PrivateAttr(default=None)

    def attach_storage(self, storage: LocalStorage) -> None:
        self._storage = storage

    def set_user_role(self, role: UserRole) -> None:
        self.user_role = role

    def login_start(self) -> None:
        self.is_loading = True
        self.error = None

    def login_success(self, user: Optional[AuthUser]) -> None:
        if user is not None:
            self.is_authenticated = True
            self.user = user
            self.onboarding_completed = True
        self.is_loading = False
        self.error = None

    def login_failure(self, error: str) -> None:
        self.is_loading = False
        self.error = error

    def complete_onboarding(self) -> None:
        self.onboarding_completed = True

    def logout(self) -> None:
        """Reset to logged out and forget the persisted role and onboarding flag."""
        self.is_authenticated = False
        self.user = None
        self.user_role = None
        self.onboarding_completed = False
        self.error = None
        if self._storage is not None:
            self._storage.remove_item(USER_ROLE_KEY)
            self._storage.remove_item(ONBOARDING_COMPLETED_KEY)

    def clear_error(self) -> None:
        self.error = None

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load_stored_state(self) -> None:
        """Restore the role and onboarding flag saved by an earlier run."""
        storage = self._require_storage()
        stored_role = storage.get_item(USER_ROLE_KEY)
        try:
            self.user_role = UserRole(stored_role) if stored_role else None
        except ValueError:
            logger.warning(f"Ignoring unknown stored user role: {stored_role!r}")
            self.user_role = None
        self.onboarding_completed = storage.get_item(ONBOARDING_COMPLETED_KEY) == "true"

    def save_user_role(self, role: UserRole) -> None:
        self._require_storage().set_item(USER_ROLE_KEY, UserRole(role).value)
        self.user_role = UserRole(role)

    def save_onboarding_completed(self) -> None:
        self._require_storage().set_item(ONBOARDING_COMPLETED_KEY, "true")
        self.onboarding_completed = True

    def _require_storage(self) -> LocalStorage:
        if self._storage is None:
            raise ValidationError(
                "No local storage attached to the auth state",
                code="STORAGE_NOT_ATTACHED",
            )
        return self._storage
