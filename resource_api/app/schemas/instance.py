"""
Pydantic schema for instances.

Instances are a CRUDE resource: other systems refer to them, so they
are never deleted, only disabled.  ``enabled`` is honoured on creation
and ignored on update; use the enable/disable endpoints to change it.
"""

from pydantic import Field, field_validator

from .base import NonRemovableDto


class InstanceDto(NonRemovableDto):
    """Schema for creating, updating and reading an instance."""

    name: str = Field(..., min_length=1, max_length=100, examples=["production"])
    path: str = Field(..., min_length=1, examples=["/srv/instances/production"])

    @field_validator("path")
    @classmethod
    def path_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Path must not be blank")
        return v
