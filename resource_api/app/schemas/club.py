"""
Pydantic schema for clubs.

Clubs are a CRUD resource: they can be removed permanently.  The club
name is unique; a duplicate name is reported with the
``CLUB_DUPLICATED_NAME`` error code.
"""

import re
from typing import Optional

from pydantic import Field, field_validator

from .base import BaseDto

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ClubDto(BaseDto):
    """Schema for creating, updating and reading a club."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Chess Club"])
    email: Optional[str] = Field(None, examples=["contact@chess.example"])

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        if len(v) > 254 or not EMAIL_PATTERN.match(v):
            raise ValueError("Email must look like name@domain.tld")
        return v
