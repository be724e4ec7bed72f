"""
Backend endpoint table.

A static, flat mapping from logical operation names to path templates.
Templates may carry {param} placeholders, filled in by interpolate()
before the call. Query strings are appended with with_query().
"""

import re
from typing import Any
from urllib.parse import quote, urlencode

from .exceptions import ValidationError


class AuthEndpoints:
    OAUTH_CALLBACK = "/api/v1/auth/oauth/callback"
    OAUTH_URL = "/api/v1/auth/oauth/{provider}/url"
    OAUTH_PROVIDERS = "/api/v1/auth/oauth/providers"


class UserEndpoints:
    INFO = "/api/user/info"
    PROFILE_STATUS = "/api/user/profile-status"
    PATIENT_PROFILE = "/api/user/patient-profile"
    PATIENT_INFO = "/api/user/patient-info"
    PATIENT_LINK_CODE = "/api/user/patient/link-code"
    DELETE = "/api/user"


class DashboardEndpoints:
    PATIENT = "/api/dashboard/patient"


class ExerciseEndpoints:
    LIST = "/api/exercise/list"
    INDOOR_STATUS = "/api/exercise/indoor/status"
    OUTDOOR_STATUS = "/api/exercise/outdoor/status"
    RECORD_WALKING = "/api/exercise/record/walking"
    RECORD_SIMPLE = "/api/exercise/record/simple"
    HISTORY = "/api/exercise/history"


class HealthEndpoints:
    PAIN_RECORD = "/api/health/pain/record"
    PAIN_RECORD_AFTER_EXERCISE = "/api/health/pain/record/after-exercise"
    PAIN_HISTORY = "/api/health/pain/history"


class GuardianEndpoints:
    LINK_PATIENT = "/api/guardian/link-patient"
    DASHBOARD = "/api/guardian/dashboard"
    PATIENT_DETAIL = "/api/guardian/patient-detail"
    NOTIFICATIONS = "/api/guardian/notifications"
    ALERT_READ = "/api/guardian/alert/{alertId}/read"


_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def interpolate(template: str, **params: Any) -> str:
    """
    Fill {param} placeholders in a path template.

    Values are percent-encoded as a single path segment.

    Raises:
        ValidationError: If a placeholder has no value
    """
    path = template
    for name, value in params.items():
        path = path.replace("{" + name + "}", quote(str(value), safe=""))

    missing = _PLACEHOLDER.findall(path)
    if missing:
        raise ValidationError(
            f"Missing path parameter(s) for {template}: {', '.join(missing)}",
            code="MISSING_PATH_PARAMETER",
            details={"template": template, "missing": missing},
        )
    return path


def with_query(path: str, **params: Any) -> str:
    """
    Append a query string to a path.

    Parameters whose value is None or empty are left out entirely; the rest
    are form-encoded in argument order. Returns the path unchanged when
    nothing is left.
    """
    pairs = [(key, value) for key, value in params.items() if value not in (None, "")]
    if not pairs:
        return path
    return f"{path}?{urlencode(pairs)}"
