"""
Create/read/update contract shared by every resource service.

A service is generic over a DTO type and an entity type.  Everything
that differs between resources is supplied by a ``ResourceDefinition``:
the three mapping functions and the factories of the resource specific
errors.  Identity handling lives here, once:

* ``create`` drops any identifier the client sent and lets the storage
  port assign one.
* ``update`` copies the DTO onto the entity fetched from storage (never
  onto a fresh entity, so fields unknown to the DTO survive) and then
  restores the ``protected_fields`` of the fetched entity.

The read-modify-write sequences carry no version check; two concurrent
updates of the same identifier may overwrite each other.

Every public method takes an optional ``logger``; controllers pass the
request scoped adapter so records carry the request id.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, Type, TypeVar, Union

from resource_api.app.core.errors import DuplicatedPropertyError, EntityNotFoundError
from resource_api.app.entities.base import BaseEntity
from resource_api.app.repositories.base import Repository
from resource_api.app.schemas.base import BaseDto

DTO = TypeVar("DTO", bound=BaseDto)
ENT = TypeVar("ENT", bound=BaseEntity)

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

module_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDefinition(Generic[DTO, ENT]):
    """Per-resource strategy injected into the generic service and controller.

    Attributes
    ----------
    name : str
        Singular resource name used in log messages (e.g. ``"club"``).
    dto_type : Type[DTO]
        Pydantic model validated on create and update requests.
    to_entity : Callable[[DTO], ENT]
        Build a new entity from a DTO.  The identifier is ignored.
    to_dto : Callable[[ENT], DTO]
        Build the DTO returned to clients from an entity.
    apply : Callable[[DTO, ENT], ENT]
        Copy the updatable fields of a DTO onto an existing entity and
        return it.
    not_found : Callable[[Optional[int]], EntityNotFoundError]
        Error raised when an identifier does not exist.
    duplicated_property : Callable[[DTO], DuplicatedPropertyError]
        Error raised when storage rejects a write of the DTO because of a
        uniqueness rule.
    """

    name: str
    dto_type: Type[DTO]
    to_entity: Callable[[DTO], ENT]
    to_dto: Callable[[ENT], DTO]
    apply: Callable[[DTO, ENT], ENT]
    not_found: Callable[[Optional[int]], EntityNotFoundError]
    duplicated_property: Callable[[DTO], DuplicatedPropertyError]


class BaseService(Generic[DTO, ENT]):
    """Readable and writable service on top of a storage port."""

    # Fields of the stored entity that ``update`` never changes.
    protected_fields: Tuple[str, ...] = ("id",)

    def __init__(self, repository: Repository[ENT], definition: ResourceDefinition[DTO, ENT]) -> None:
        self.repository = repository
        self.definition = definition

    def create(self, dto: DTO, logger: Optional[LoggerLike] = None) -> DTO:
        """Persist a new entity built from ``dto`` and return its DTO."""
        log = logger or module_logger
        entity = self.definition.to_entity(dto)
        entity.id = None
        saved = self.repository.save(entity)
        log.info("Created %s %s", self.definition.name, saved.id)
        log.debug("Created %r", saved)
        return self.definition.to_dto(saved)

    def find_by_id(self, id: int, logger: Optional[LoggerLike] = None) -> DTO:
        """Return the DTO of entity ``id``.

        Raises
        ------
        EntityNotFoundError
            If no entity has this identifier.
        """
        entity = self.get_safe_entity(id, logger)
        (logger or module_logger).debug("Found %r", entity)
        return self.definition.to_dto(entity)

    def find_all(self, logger: Optional[LoggerLike] = None) -> List[DTO]:
        """Return the DTOs of the listed entities, in storage order."""
        entities = self._list_entities()
        (logger or module_logger).debug("Listed %d %s record(s)", len(entities), self.definition.name)
        return [self.definition.to_dto(entity) for entity in entities]

    def update(self, dto: DTO, logger: Optional[LoggerLike] = None) -> DTO:
        """Overwrite the fields of entity ``dto.id`` with the values of ``dto``.

        Raises
        ------
        EntityNotFoundError
            If ``dto.id`` does not exist.  Nothing is written in that case.
        """
        log = logger or module_logger
        entity = self.get_safe_entity(dto.id, log)
        protected = {name: getattr(entity, name) for name in self.protected_fields}
        entity = self.definition.apply(dto, entity)
        for name, value in protected.items():
            setattr(entity, name, value)
        saved = self.repository.save(entity)
        log.info("Updated %s %s", self.definition.name, saved.id)
        log.debug("Updated %r", saved)
        return self.definition.to_dto(saved)

    def get_safe_entity(self, id: Optional[int], logger: Optional[LoggerLike] = None) -> ENT:
        """Fetch entity ``id`` or raise the resource's not found error."""
        entity = self.repository.find_one(id) if id is not None else None
        if entity is None:
            (logger or module_logger).debug("%s %s not found", self.definition.name, id)
            raise self.definition.not_found(id)
        return entity

    def _list_entities(self) -> List[ENT]:
        return list(self.repository.find_all())
