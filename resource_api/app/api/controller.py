"""
Generic REST controllers.

A controller turns a resource service into an ``APIRouter``.  It is
configured with the resource's ``ResourceDefinition`` and a service
provider, a FastAPI dependency returning the service to call for the
current request.  ``build_router`` registers only the routes of the
controller's capability profile:

========  ===================  ==========================
Method    Path                 Profile
========  ===================  ==========================
POST      ``""``               all
GET       ``/{id}``            all
GET       ``""``               all
PUT       ``/{id}``            all
DELETE    ``/{id}``            CRUD (``DeletableRoutes``)
PUT       ``/{id}/enable``     CRUDE (``TogglableRoutes``)
PUT       ``/{id}/disable``    CRUDE (``TogglableRoutes``)
========  ===================  ==========================

Route handlers are plain functions, so FastAPI runs them in its
threadpool and blocking storage ports do not stall the event loop.
Payloads are validated by FastAPI before the controller runs.  On update
the identifier of the path always wins over the one in the body.
Constraint violations reported by the storage port on create and update
are re-raised as the resource's ``DuplicatedPropertyError``.
"""

import logging
from typing import Any, Callable, List

from fastapi import APIRouter, Depends, Response, status

from resource_api.app.core.errors import DuplicatedPropertyError
from resource_api.app.core.logging_config import get_request_logger
from resource_api.app.repositories.base import ConstraintViolation
from resource_api.app.schemas.base import BaseDto
from resource_api.app.services.base import LoggerLike, ResourceDefinition
from resource_api.app.services.capabilities import Deletable, Readable, Togglable, Writable

ServiceProvider = Callable[..., Any]


class ResourceController:
    """Create, read and update routes shared by every resource."""

    def __init__(self, definition: ResourceDefinition, service_provider: ServiceProvider) -> None:
        self.definition = definition
        self.service_provider = service_provider

    def create(self, service: Writable, dto: BaseDto, logger: LoggerLike) -> BaseDto:
        try:
            return service.create(dto, logger=logger)
        except ConstraintViolation as exc:
            raise self._duplicated(dto, exc, logger) from exc

    def find_by_id(self, service: Readable, id: int, logger: LoggerLike) -> BaseDto:
        return service.find_by_id(id, logger=logger)

    def find_all(self, service: Readable, logger: LoggerLike) -> List[BaseDto]:
        return service.find_all(logger=logger)

    def update(self, service: Writable, id: int, dto: BaseDto, logger: LoggerLike) -> BaseDto:
        if dto.id != id:
            logger.debug("Identifier from DTO (%s) is different than identifier from URI (%s)", dto.id, id)
            dto = dto.model_copy(update={"id": id})
        try:
            return service.update(dto, logger=logger)
        except ConstraintViolation as exc:
            raise self._duplicated(dto, exc, logger) from exc

    def _duplicated(self, dto: BaseDto, exc: ConstraintViolation, logger: LoggerLike) -> DuplicatedPropertyError:
        logger.info("Storage rejected %s: %s", self.definition.name, exc)
        return self.definition.duplicated_property(dto)

    def build_router(self) -> APIRouter:
        router = APIRouter()
        self.register_routes(router)
        return router

    def register_routes(self, router: APIRouter) -> None:
        controller = self
        name = self.definition.name
        dto_type = self.definition.dto_type
        get_service = self.service_provider

        @router.post("", response_model=dto_type, name=f"create_{name}")
        def create(
            dto: dto_type,
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Any:
            """Create a record.  Any identifier in the body is ignored."""
            return controller.create(service, dto, logger)

        @router.get("/{id}", response_model=dto_type, name=f"get_{name}")
        def find_by_id(
            id: int,
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Any:
            """Return one record or a 404 error."""
            return controller.find_by_id(service, id, logger)

        @router.get("", response_model=List[dto_type], name=f"list_{name}")
        def find_all(
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Any:
            """List the records.  CRUDE resources list enabled records only."""
            return controller.find_all(service, logger)

        @router.put("/{id}", response_model=dto_type, name=f"update_{name}")
        def update(
            id: int,
            dto: dto_type,
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Any:
            """Overwrite record ``id``; the body identifier is replaced by the path one."""
            return controller.update(service, id, dto, logger)


class DeletableRoutes:
    """Adds ``DELETE /{id}`` for CRUD resources."""

    definition: ResourceDefinition
    service_provider: ServiceProvider

    def delete(self, service: Deletable, id: int, logger: LoggerLike) -> None:
        service.delete(id, logger=logger)

    def register_routes(self, router: APIRouter) -> None:
        super().register_routes(router)
        controller = self
        get_service = self.service_provider

        @router.delete("/{id}", response_class=Response, name=f"delete_{self.definition.name}")
        def delete(
            id: int,
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Response:
            """Remove record ``id`` permanently; empty 200 response."""
            controller.delete(service, id, logger)
            return Response(status_code=status.HTTP_200_OK)


class TogglableRoutes:
    """Adds ``PUT /{id}/enable`` and ``PUT /{id}/disable`` for CRUDE resources."""

    definition: ResourceDefinition
    service_provider: ServiceProvider

    def enable(self, service: Togglable, id: int, logger: LoggerLike) -> BaseDto:
        return service.enable(id, logger=logger)

    def disable(self, service: Togglable, id: int, logger: LoggerLike) -> BaseDto:
        return service.disable(id, logger=logger)

    def register_routes(self, router: APIRouter) -> None:
        super().register_routes(router)
        controller = self
        name = self.definition.name
        dto_type = self.definition.dto_type
        get_service = self.service_provider

        @router.put("/{id}/enable", response_model=dto_type, name=f"enable_{name}")
        def enable(
            id: int,
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Any:
            return controller.enable(service, id, logger)

        @router.put("/{id}/disable", response_model=dto_type, name=f"disable_{name}")
        def disable(
            id: int,
            service: Any = Depends(get_service),
            logger: logging.LoggerAdapter = Depends(get_request_logger),
        ) -> Any:
            return controller.disable(service, id, logger)


class CrudController(DeletableRoutes, ResourceController):
    pass


class CrudeController(TogglableRoutes, ResourceController):
    pass
