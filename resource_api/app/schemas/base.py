"""
Base transfer models shared by every resource.

``BaseDto`` mirrors ``BaseEntity`` and ``NonRemovableDto`` mirrors
``NonRemovableEntity``.  Concrete DTOs add their domain fields and the
validation constraints for them.  The module also defines the structured
error payload returned by every endpoint on failure.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseDto(BaseModel):
    """Wire representation of a persisted record.

    ``id`` is advisory on requests: it is ignored on create and replaced
    by the path identifier on update.
    """

    id: Optional[int] = Field(None, description="Identifier assigned on creation")

    model_config = ConfigDict(from_attributes=True)


class NonRemovableDto(BaseDto):
    """DTO of a resource that is disabled instead of deleted."""

    enabled: bool = Field(True, description="Whether the record is active; changed through enable/disable")


class FieldErrorDto(BaseModel):
    """One failing field of a rejected payload."""

    field: str
    code: str
    message: str


class RestErrorDto(BaseModel):
    """Structured error payload.

    Serialised with camelCase keys (``developerInfo``, ``fieldErrors``).
    ``field_errors`` is only populated for validation failures.
    """

    status: int
    code: str
    message: str
    developer_info: str = Field("", alias="developerInfo")
    field_errors: List[FieldErrorDto] = Field(default_factory=list, alias="fieldErrors")

    model_config = ConfigDict(populate_by_name=True)
