"""
Domain errors and their translation to HTTP responses.

Services raise ``EntityNotFoundError`` when a looked up identifier does
not exist; controllers raise ``DuplicatedPropertyError`` when the
storage port reports a constraint violation.  Both carry a
resource-specific ``code`` chosen by the resource definition and are
rendered by ``register_exception_handlers`` as::

    {"status": 404, "code": "...", "message": "...",
     "developerInfo": "...", "fieldErrors": []}

Payload validation failures detected by FastAPI are rendered with the
same shape, status 400 and one entry per failing field.  Routing
errors (unknown path, method not allowed) keep their status and use
the HTTP status name as code.  Storage failures other than constraint
violations are not handled here and surface as plain server errors.
"""

import logging
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resource_api.app.schemas.base import FieldErrorDto, RestErrorDto

logger = logging.getLogger(__name__)

VALIDATION_ERROR_CODE = "VALIDATION_FAILED"


class ResourceError(Exception):
    """Base class of the errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, code: str, message: str, developer_info: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.developer_info = developer_info

    def to_dto(self) -> RestErrorDto:
        return RestErrorDto(
            status=self.status_code,
            code=self.code,
            message=self.message,
            developer_info=self.developer_info,
        )


class EntityNotFoundError(ResourceError):
    """The requested identifier does not exist in storage."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, id: Optional[int], code: str, message: str, developer_info: str = "") -> None:
        super().__init__(code, message, developer_info)
        self.id = id


class DuplicatedPropertyError(ResourceError):
    """A create or update would break a uniqueness rule of the resource."""

    status_code = status.HTTP_409_CONFLICT


def field_errors_from(errors: list[dict[str, Any]]) -> list[FieldErrorDto]:
    """Convert pydantic error dicts into field errors.

    The location prefix (``body``, ``path``, ``query``) is dropped so
    ``("body", "name")`` becomes ``"name"``.  Malformed JSON is reported
    against ``"body"`` rather than the offset of the decoding error.
    """
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if error.get("type") == "json_invalid":
            loc = []
        if loc and loc[0] in {"body", "path", "query", "header"}:
            loc = loc[1:]
        field_errors.append(
            FieldErrorDto(
                field=".".join(loc) or "body",
                code=error.get("type", "invalid"),
                message=error.get("msg", ""),
            )
        )
    return field_errors


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    logger.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dto().model_dump(by_alias=True),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = field_errors_from(list(exc.errors()))
    logger.debug("%s %s rejected with %d field error(s)", request.method, request.url.path, len(field_errors))
    error = RestErrorDto(
        status=status.HTTP_400_BAD_REQUEST,
        code=VALIDATION_ERROR_CODE,
        message="Request payload is not valid",
        developer_info=f"{len(field_errors)} field(s) failed validation",
        field_errors=field_errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error.model_dump(by_alias=True),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        code = HTTPStatus(exc.status_code).name
    except ValueError:
        code = "HTTP_ERROR"
    error = RestErrorDto(
        status=exc.status_code,
        code=code,
        message=str(exc.detail),
        developer_info=f"{request.method} {request.url.path}",
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error.model_dump(by_alias=True),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers rendering domain, validation and routing errors."""
    app.add_exception_handler(ResourceError, resource_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
