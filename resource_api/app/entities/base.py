"""
Base persisted records.

``id`` is ``None`` until the storage port saves the entity for the
first time and never changes afterwards.  ``enabled`` is a first class
toggle changed only by the enable/disable operations of a CRUDE
service; it is not a soft delete marker.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BaseEntity:
    id: Optional[int] = None


@dataclass
class NonRemovableEntity(BaseEntity):
    enabled: bool = False

    def __post_init__(self) -> None:
        # SQLite hands booleans back as integers.
        self.enabled = bool(self.enabled)
