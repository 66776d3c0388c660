"""Exception handlers mapping resolution errors to HTTP responses.

register_exception_handlers(app) installs them once in create_app(). Domain
exceptions carry their own error_code and details; only the HTTP status is
decided here, by the nearest mapped class in the exception's MRO. Error
responses echo the caller's request id header when one was sent.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restws.core.config import get_settings
from restws.domain.exceptions import (
    DuplicateResourceException,
    DuplicateSearchHandlerException,
    InvalidSearchException,
    ObjectNotFoundException,
    ResourceDeletionException,
    RestWebServiceException,
    UnknownResourceException,
    ValidationException,
)

logger = logging.getLogger(__name__)

_STATUS_BY_EXCEPTION: dict[type[RestWebServiceException], int] = {
    UnknownResourceException: 404,
    ObjectNotFoundException: 404,
    ValidationException: 400,
    InvalidSearchException: 400,
    DuplicateResourceException: 409,
    DuplicateSearchHandlerException: 409,
    ResourceDeletionException: 409,
}


def status_for(exc: RestWebServiceException) -> int:
    """Return the HTTP status for a domain exception (400 when no class is mapped)."""
    for cls in type(exc).__mro__:
        status = _STATUS_BY_EXCEPTION.get(cls)
        if status is not None:
            return status
    return 400


def _error_response(request: Request, status: int, body: dict[str, Any]) -> JSONResponse:
    header = get_settings().request_id_header
    request_id = request.headers.get(header)
    headers = {header: request_id} if request_id else None
    return JSONResponse(status_code=status, content=body, headers=headers)


def _rest_exception_handler(
    request: Request, exc: RestWebServiceException
) -> JSONResponse:
    status = status_for(exc)
    log = logger.warning if status == 409 else logger.info
    log(
        "%s %s -> %d %s: %s",
        request.method,
        request.url.path,
        status,
        exc.error_code,
        exc.message,
    )
    return _error_response(request, status, exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for bodies or parameters FastAPI itself rejects (e.g. non-object JSON)."""
    return _error_response(
        request,
        422,
        {
            "error": "VALIDATION_ERROR",
            "message": "Request body or parameters are invalid",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(
        request, exc.status_code, {"error": "HTTP_ERROR", "message": exc.detail}
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is exposed only in debug mode."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(request, 500, {"error": "INTERNAL_ERROR", "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on app; call once after creating it."""
    app.add_exception_handler(RestWebServiceException, _rest_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
