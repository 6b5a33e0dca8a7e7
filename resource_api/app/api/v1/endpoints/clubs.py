"""
Club endpoints for API v1.

Clubs are a CRUD resource mounted under ``/clubs``: create, read,
update and permanent delete.  A duplicate club name is answered with a
409 ``CLUB_DUPLICATED_NAME`` error.
"""

from functools import lru_cache

from fastapi import Depends

from resource_api.app.api.controller import CrudController
from resource_api.app.core.config import settings
from resource_api.app.entities.club import Club
from resource_api.app.repositories.base import CrudRepository
from resource_api.app.repositories.memory import InMemoryCrudRepository
from resource_api.app.repositories.sqlite import SqliteCrudRepository
from resource_api.app.schemas.club import ClubDto
from resource_api.app.services.club_service import CLUB, build_club_service
from resource_api.app.services.crud_service import CrudService


@lru_cache(maxsize=None)
def get_club_repository() -> CrudRepository[Club]:
    """Storage port shared by all club requests, chosen by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "memory":
        return InMemoryCrudRepository(unique_fields=("name",))
    return SqliteCrudRepository("clubs", Club)


def get_club_service(
    repository: CrudRepository[Club] = Depends(get_club_repository),
) -> CrudService[ClubDto, Club]:
    return build_club_service(repository)


controller = CrudController(CLUB, get_club_service)
router = controller.build_router()
