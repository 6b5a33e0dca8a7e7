"""
Service of CRUDE resources.

CRUDE resources are never deleted.  Their ``enabled`` flag is changed
only by ``enable`` and ``disable``, which fetch the current record first
and touch nothing but the flag, so a stale client view cannot overwrite
other fields.  Both operations are idempotent.  The generic ``update``
leaves the flag alone and ``find_all`` lists enabled records only;
disabled records stay reachable through ``find_by_id``.
"""

from typing import List, Optional

from resource_api.app.repositories.base import NENT, CrudeRepository

from .base import DTO, BaseService, LoggerLike, ResourceDefinition, module_logger


class TogglableMixin:
    """Adds ``enable``/``disable`` and protects the flag from ``update``."""

    repository: CrudeRepository
    definition: ResourceDefinition

    protected_fields = ("id", "enabled")

    def enable(self, id: int, logger: Optional[LoggerLike] = None):
        return self._set_enabled(id, True, logger)

    def disable(self, id: int, logger: Optional[LoggerLike] = None):
        return self._set_enabled(id, False, logger)

    def _set_enabled(self, id: int, enabled: bool, logger: Optional[LoggerLike]):
        log = logger or module_logger
        entity = self.get_safe_entity(id, log)
        entity.enabled = enabled
        saved = self.repository.save(entity)
        log.info("%s %s %s", "Enabled" if enabled else "Disabled", self.definition.name, id)
        return self.definition.to_dto(saved)


class CrudeService(TogglableMixin, BaseService[DTO, NENT]):
    def __init__(self, repository: CrudeRepository[NENT], definition: ResourceDefinition[DTO, NENT]) -> None:
        super().__init__(repository, definition)

    def _list_entities(self) -> List[NENT]:
        return list(self.repository.find_all_enabled())
