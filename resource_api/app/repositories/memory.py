"""
In-memory storage ports.

Records live in a dictionary keyed by identifier and are copied on the
way in and out, so an entity handed to a caller can be mutated freely
without touching the stored record until ``save`` is called.
Identifiers are sequential integers starting at 1.  Fields listed in
``unique_fields`` behave like a UNIQUE column: saving a second record
with the same value raises ``ConstraintViolation``.
"""

import copy
import threading
from typing import Dict, Iterable, List, Optional

from .base import ENT, NENT, ConstraintViolation, CrudeRepository, CrudRepository, Repository


class InMemoryRepository(Repository[ENT]):
    """Dictionary backed implementation of the base storage port."""

    def __init__(self, unique_fields: Iterable[str] = ()) -> None:
        self.unique_fields = tuple(unique_fields)
        self._records: Dict[int, ENT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_one(self, id: int) -> Optional[ENT]:
        with self._lock:
            record = self._records.get(id)
            return copy.copy(record) if record is not None else None

    def find_all(self) -> List[ENT]:
        with self._lock:
            return [copy.copy(self._records[key]) for key in sorted(self._records)]

    def save(self, entity: ENT) -> ENT:
        with self._lock:
            self._check_unique(entity)
            stored = copy.copy(entity)
            if stored.id is None:
                stored.id = self._next_id
            self._next_id = max(self._next_id, stored.id + 1)
            self._records[stored.id] = stored
            return copy.copy(stored)

    def _check_unique(self, entity: ENT) -> None:
        for name in self.unique_fields:
            value = getattr(entity, name)
            for other in self._records.values():
                if other.id != entity.id and getattr(other, name) == value:
                    raise ConstraintViolation(f"UNIQUE constraint failed: {name}")


class InMemoryCrudRepository(InMemoryRepository[ENT], CrudRepository[ENT]):
    def delete(self, entity: ENT) -> None:
        with self._lock:
            self._records.pop(entity.id, None)


class InMemoryCrudeRepository(InMemoryRepository[NENT], CrudeRepository[NENT]):
    def find_all_enabled(self) -> List[NENT]:
        return [entity for entity in self.find_all() if entity.enabled]
