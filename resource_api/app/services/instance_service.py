"""
Instance resource definition.

Instances are a CRUDE resource: other systems depend on them, so they
are disabled instead of deleted.  ``apply_instance`` deliberately does
not copy ``enabled``; the CRUDE service also restores the stored flag
after applying an update.
"""

from typing import Optional

from resource_api.app.core.errors import DuplicatedPropertyError, EntityNotFoundError
from resource_api.app.entities.instance import Instance
from resource_api.app.repositories.base import CrudeRepository
from resource_api.app.schemas.instance import InstanceDto

from .base import ResourceDefinition
from .crude_service import CrudeService

INSTANCE_NOT_FOUND = "INSTANCE_NOT_FOUND"
INSTANCE_DUPLICATED_NAME = "INSTANCE_DUPLICATED_NAME"


def instance_to_entity(dto: InstanceDto) -> Instance:
    return Instance(enabled=dto.enabled, name=dto.name, path=dto.path)


def instance_to_dto(entity: Instance) -> InstanceDto:
    return InstanceDto(id=entity.id, enabled=entity.enabled, name=entity.name, path=entity.path)


def apply_instance(dto: InstanceDto, entity: Instance) -> Instance:
    entity.name = dto.name
    entity.path = dto.path
    return entity


def instance_not_found(id: Optional[int]) -> EntityNotFoundError:
    return EntityNotFoundError(
        id,
        INSTANCE_NOT_FOUND,
        f"Instance {id} not found",
        f"No instance is stored with identifier {id}",
    )


def instance_duplicated_name(dto: InstanceDto) -> DuplicatedPropertyError:
    return DuplicatedPropertyError(
        INSTANCE_DUPLICATED_NAME,
        f"An instance named {dto.name!r} already exists",
        "Instance names must be unique",
    )


INSTANCE = ResourceDefinition(
    name="instance",
    dto_type=InstanceDto,
    to_entity=instance_to_entity,
    to_dto=instance_to_dto,
    apply=apply_instance,
    not_found=instance_not_found,
    duplicated_property=instance_duplicated_name,
)


def build_instance_service(repository: CrudeRepository[Instance]) -> CrudeService[InstanceDto, Instance]:
    return CrudeService(repository, INSTANCE)
