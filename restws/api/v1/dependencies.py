"""Presentation-layer dependency injection.

Provides FastAPI Depends() for the RestService (built once, kept on
app.state) and the per-request RequestContext.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from restws.application.dtos.context import RequestContext
from restws.application.services.rest_service import RestService
from restws.core.config import get_settings


def get_rest_service(request: Request) -> RestService:
    """RestService from app.state (503 until the lifespan or create_app sets it)."""
    service = getattr(request.app.state, "rest_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="REST service is not initialized")
    return service


def get_request_context(
    request: Request,
    rest_service: Annotated[RestService, Depends(get_rest_service)],
) -> RequestContext:
    """Request parameters (name -> all values) and the resolved representation."""
    settings = get_settings()
    parameters: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        parameters.setdefault(key, []).append(value)
    token = request.query_params.get(rest_service.representation_parameter)
    return RequestContext(
        representation=rest_service.get_representation(token),
        parameters=parameters,
        request_id=request.headers.get(settings.request_id_header),
    )


def search_parameters(
    rest_service: RestService, context: RequestContext
) -> Mapping[str, Sequence[str]]:
    """Request parameters minus the representation parameter (selector is kept)."""
    excluded = rest_service.representation_parameter
    return {k: v for k, v in context.parameters.items() if k != excluded}
