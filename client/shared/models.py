"""
Shared data models used across modules.

The response envelope is the one wire contract every backend endpoint
honors. It is validated here, at the transport boundary, before any
domain module looks at it.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class EnvelopeStatus(str, Enum):
    """Outcome tag carried by every response envelope."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class Envelope(BaseModel):
    """
    The {status, data, message, action} wrapper around every response.

    data is endpoint specific (object, array, string or null) and is kept
    exactly as decoded from JSON.
    """

    status: EnvelopeStatus = Field(..., description="SUCCESS or ERROR")
    data: Any = Field(None, description="Endpoint-specific payload")
    message: Optional[str] = Field(None, description="Human-readable message")
    action: Optional[str] = Field(None, description="Reserved routing hint")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def is_success(self) -> bool:
        return self.status == EnvelopeStatus.SUCCESS

    @property
    def has_data(self) -> bool:
        """
        Whether data counts as present.

        null and the empty string are absent; anything else, including
        [] and {}, is present.
        """
        return self.data is not None and self.data != ""


class WireModel(BaseModel):
    """
    Base class for request bodies and query parameters.

    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the backend's JSON shape, dropping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def wire_body(cls, value: Any) -> dict[str, Any]:
        """
        Validate a model instance or plain dict and serialize it.

        Dicts may use either the snake_case or the camelCase field names.
        """
        model = value if isinstance(value, cls) else cls.model_validate(value)
        return model.to_wire()


class QueryModel(WireModel):
    """
    Base class for query-string filters.

    An empty string means the filter was not given, the same as None, so
    it is dropped instead of being validated.
    """

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value
