"""
Session/token state.

The session holds the current bearer token. It is injected into the API
client, which takes one snapshot per request: a request built before a
logout carries the old token in full, one built after carries none, and
nothing in between is possible.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import jwt


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Immutable view of the session at one point in time."""

    token: Optional[str]
    generation: int

    @property
    def authorization(self) -> Optional[str]:
        """Value for the Authorization header, or None when logged out."""
        return f"Bearer {self.token}" if self.token else None


class Session:
    """
    Holds the bearer token for outgoing requests.

    There are no listeners: a change is observed by the next request's
    header construction only, and clearing the token does not touch
    requests already in flight.
    """

    def __init__(self, token: Optional[str] = None):
        self._token = token
        self._generation = 0

    def set_token(self, token: Optional[str]) -> None:
        """Overwrite the token unconditionally."""
        self._token = token or None
        self._generation += 1

    def get_token(self) -> Optional[str]:
        return self._token

    def clear(self) -> None:
        """Drop the token. Safe to call when already logged out."""
        self.set_token(None)

    def snapshot(self) -> Credentials:
        return Credentials(token=self._token, generation=self._generation)

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    @property
    def expires_at(self) -> Optional[datetime]:
        """
        Expiry of the current token, read from its JWT exp claim.

        The signature is not verified; the backend remains the authority.
        Returns None when there is no token, it is not a JWT, or it has no
        usable numeric exp claim.
        """
        if not self._token:
            return None
        try:
            claims = jwt.decode(self._token, options={"verify_signature": False})
        except jwt.InvalidTokenError:
            logger.debug("Session token is not a decodable JWT")
            return None
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            return None
        try:
            return datetime.fromtimestamp(exp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Session token exp claim is out of range: {exp!r}")
            return None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= expires_at


# Process-wide default session
_session_instance: Optional[Session] = None


def get_session() -> Session:
    """Get the default session singleton."""
    global _session_instance
    if _session_instance is None:
        _session_instance = Session()
    return _session_instance


def reset_session() -> None:
    """Reset the default session singleton (for testing)."""
    global _session_instance
    _session_instance = None


def set_auth_token(token: Optional[str]) -> None:
    """Set (or with None, clear) the token on the default session."""
    get_session().set_token(token)


def get_auth_token() -> Optional[str]:
    """Read the token from the default session."""
    return get_session().get_token()
