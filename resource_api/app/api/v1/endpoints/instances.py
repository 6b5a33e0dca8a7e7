"""
Instance endpoints for API v1.

Instances are a CRUDE resource mounted under ``/instances``.  There is
no DELETE route: an instance is switched off with
``PUT /instances/{id}/disable`` and back on with ``.../enable``.  The
list route only returns enabled instances; a disabled one can still be
read and updated by identifier.
"""

from functools import lru_cache

from fastapi import Depends

from resource_api.app.api.controller import CrudeController
from resource_api.app.core.config import settings
from resource_api.app.entities.instance import Instance
from resource_api.app.repositories.base import CrudeRepository
from resource_api.app.repositories.memory import InMemoryCrudeRepository
from resource_api.app.repositories.sqlite import SqliteCrudeRepository
from resource_api.app.schemas.instance import InstanceDto
from resource_api.app.services.crude_service import CrudeService
from resource_api.app.services.instance_service import INSTANCE, build_instance_service


@lru_cache(maxsize=None)
def get_instance_repository() -> CrudeRepository[Instance]:
    """Storage port shared by all instance requests, chosen by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "memory":
        return InMemoryCrudeRepository(unique_fields=("name",))
    return SqliteCrudeRepository("instances", Instance)


def get_instance_service(
    repository: CrudeRepository[Instance] = Depends(get_instance_repository),
) -> CrudeService[InstanceDto, Instance]:
    return build_instance_service(repository)


controller = CrudeController(INSTANCE, get_instance_service)
router = controller.build_router()
