"""
Capability interfaces of a resource service.

Every service is ``Readable`` and ``Writable``.  A CRUD service is also
``Deletable``; a CRUDE service is ``Togglable`` instead.  The protocols
are structural, so the controllers accept any object with the right
methods, including test doubles.
"""

from typing import List, Optional, Protocol, TypeVar, runtime_checkable

from .base import LoggerLike

DTO = TypeVar("DTO")


@runtime_checkable
class Readable(Protocol[DTO]):
    def find_by_id(self, id: int, logger: Optional[LoggerLike] = None) -> DTO:
        ...

    def find_all(self, logger: Optional[LoggerLike] = None) -> List[DTO]:
        ...


@runtime_checkable
class Writable(Protocol[DTO]):
    def create(self, dto: DTO, logger: Optional[LoggerLike] = None) -> DTO:
        ...

    def update(self, dto: DTO, logger: Optional[LoggerLike] = None) -> DTO:
        ...


@runtime_checkable
class Deletable(Protocol):
    def delete(self, id: int, logger: Optional[LoggerLike] = None) -> None:
        ...


@runtime_checkable
class Togglable(Protocol[DTO]):
    def enable(self, id: int, logger: Optional[LoggerLike] = None) -> DTO:
        ...

    def disable(self, id: int, logger: Optional[LoggerLike] = None) -> DTO:
        ...
