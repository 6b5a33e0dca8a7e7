"""Persisted instance record."""

from dataclasses import dataclass

from .base import NonRemovableEntity


@dataclass
class Instance(NonRemovableEntity):
    name: str = ""
    path: str = ""
