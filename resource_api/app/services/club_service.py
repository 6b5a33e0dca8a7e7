"""
Club resource definition.

Clubs are a CRUD resource.  The mappings below are the only club
specific code the service and controller need; ``build_club_service``
wires them to a storage port.
"""

from typing import Optional

from resource_api.app.core.errors import DuplicatedPropertyError, EntityNotFoundError
from resource_api.app.entities.club import Club
from resource_api.app.repositories.base import CrudRepository
from resource_api.app.schemas.club import ClubDto

from .base import ResourceDefinition
from .crud_service import CrudService

CLUB_NOT_FOUND = "CLUB_NOT_FOUND"
CLUB_DUPLICATED_NAME = "CLUB_DUPLICATED_NAME"


def club_to_entity(dto: ClubDto) -> Club:
    return Club(name=dto.name, email=dto.email)


def club_to_dto(entity: Club) -> ClubDto:
    return ClubDto(id=entity.id, name=entity.name, email=entity.email)


def apply_club(dto: ClubDto, entity: Club) -> Club:
    entity.name = dto.name
    entity.email = dto.email
    return entity


def club_not_found(id: Optional[int]) -> EntityNotFoundError:
    return EntityNotFoundError(
        id,
        CLUB_NOT_FOUND,
        f"Club {id} not found",
        f"No club is stored with identifier {id}",
    )


def club_duplicated_name(dto: ClubDto) -> DuplicatedPropertyError:
    return DuplicatedPropertyError(
        CLUB_DUPLICATED_NAME,
        f"A club named {dto.name!r} already exists",
        "Club names must be unique",
    )


CLUB = ResourceDefinition(
    name="club",
    dto_type=ClubDto,
    to_entity=club_to_entity,
    to_dto=club_to_dto,
    apply=apply_club,
    not_found=club_not_found,
    duplicated_property=club_duplicated_name,
)


def build_club_service(repository: CrudRepository[Club]) -> CrudService[ClubDto, Club]:
    return CrudService(repository, CLUB)
