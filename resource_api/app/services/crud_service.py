"""
Service of CRUD resources: the base contract plus permanent removal.
"""

from typing import Optional

from resource_api.app.repositories.base import CrudRepository

from .base import DTO, ENT, BaseService, LoggerLike, ResourceDefinition, module_logger


class DeletableMixin:
    """Adds ``delete`` to a service whose repository is a ``CrudRepository``."""

    repository: CrudRepository
    definition: ResourceDefinition

    def delete(self, id: int, logger: Optional[LoggerLike] = None) -> None:
        """Remove entity ``id`` permanently.

        Raises ``EntityNotFoundError`` if it does not exist.  What happens
        on a second concurrent delete is up to the storage engine.
        """
        log = logger or module_logger
        entity = self.get_safe_entity(id, log)
        self.repository.delete(entity)
        log.info("Deleted %s %s", self.definition.name, id)


class CrudService(DeletableMixin, BaseService[DTO, ENT]):
    def __init__(self, repository: CrudRepository[ENT], definition: ResourceDefinition[DTO, ENT]) -> None:
        super().__init__(repository, definition)
