"""Persisted club record."""

from dataclasses import dataclass
from typing import Optional

from .base import BaseEntity


@dataclass
class Club(BaseEntity):
    name: str = ""
    email: Optional[str] = None
