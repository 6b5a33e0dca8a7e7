"""
Storage port contracts consumed by the service layer.

``Repository`` is the minimal contract shared by both capability
profiles.  ``CrudRepository`` adds permanent removal and
``CrudeRepository`` adds the listing of enabled records.  A concrete
storage engine implements one of the two.

Implementations must not raise for a missing record in ``find_one``.
A uniqueness or other constraint failure is reported as
``ConstraintViolation`` so the controller can turn it into the
resource's duplicated property error; any other engine failure is
reported as ``StorageError`` and is not translated.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from resource_api.app.entities.base import BaseEntity, NonRemovableEntity

ENT = TypeVar("ENT", bound=BaseEntity)
NENT = TypeVar("NENT", bound=NonRemovableEntity)


class StorageError(Exception):
    """Opaque failure of the storage engine."""


class ConstraintViolation(StorageError):
    """The storage engine rejected a write because of a constraint."""


class Repository(ABC, Generic[ENT]):
    """Find and save entities of one resource."""

    @abstractmethod
    def find_one(self, id: int) -> Optional[ENT]:
        """Return the entity with the given identifier, or ``None``."""

    @abstractmethod
    def find_all(self) -> List[ENT]:
        """Return every entity.  Callers must not rely on the order."""

    @abstractmethod
    def save(self, entity: ENT) -> ENT:
        """Insert (``id is None``) or update an entity and return the stored form."""


class CrudRepository(Repository[ENT]):
    """Storage port of a resource that supports permanent removal."""

    @abstractmethod
    def delete(self, entity: ENT) -> None:
        """Remove an entity permanently."""


class CrudeRepository(Repository[NENT]):
    """Storage port of a resource that is disabled instead of deleted."""

    @abstractmethod
    def find_all_enabled(self) -> List[NENT]:
        """Return only the entities whose ``enabled`` flag is set."""
