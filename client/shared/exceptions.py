"""
Base exception classes for the WalkMate client.

Each domain module defines its own exceptions that inherit from these bases,
so consumers can catch a whole feature area or the whole client at once.

Network failures (DNS, connection reset, timeouts) are not wrapped here;
the underlying httpx.TransportError propagates unchanged.
"""

from typing import Optional, Any


class WalkMateError(Exception):
    """
    Base exception for all WalkMate client errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging or display."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(WalkMateError):
    """Client-side input validation failed."""

    pass


class TransportError(WalkMateError):
    """The backend answered, but not with something the client can use."""

    pass


class HTTPStatusError(TransportError):
    """The backend answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, path: Optional[str] = None):
        details: dict[str, Any] = {"status_code": status_code}
        if path:
            details["path"] = path
        super().__init__(
            f"HTTP error! status: {status_code}",
            code="HTTP_ERROR",
            details=details,
        )
        self.status_code = status_code


class InvalidResponseError(TransportError):
    """A 2xx response body was not JSON, or not a response envelope."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message,
            code="INVALID_RESPONSE",
            details={"path": path} if path else {},
        )


class ApiResponseError(WalkMateError):
    """
    The backend reported an application-level failure.

    Raised when the envelope status is not SUCCESS, or when an endpoint that
    requires data returned none. The message is the operation's fixed string;
    whatever the server said is kept in server_message.
    """

    def __init__(
        self,
        message: str,
        server_message: Optional[str] = None,
        action: Optional[str] = None,
        code: Optional[str] = None,
    ):
        details: dict[str, Any] = {}
        if server_message:
            details["server_message"] = server_message
        if action:
            details["action"] = action
        super().__init__(message, code=code or "API_ERROR", details=details)
        self.server_message = server_message
        self.action = action


class TrackingError(WalkMateError):
    """An exercise state machine was driven through an invalid transition."""

    def __init__(self, message: str, state: Optional[str] = None):
        super().__init__(
            message,
            code="INVALID_TRANSITION",
            details={"state": state} if state else {},
        )
